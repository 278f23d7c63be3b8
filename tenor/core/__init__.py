"""tenor.core — result values, errors and supporting value types."""

from tenor.core.calendar import add_business_days as add_business_days
from tenor.core.calendar import adjust_date as adjust_date
from tenor.core.calendar import day_count_fraction as day_count_fraction
from tenor.core.errors import CalculationError as CalculationError
from tenor.core.errors import FieldViolation as FieldViolation
from tenor.core.errors import ParseError as ParseError
from tenor.core.errors import ScheduleError as ScheduleError
from tenor.core.errors import TenorError as TenorError
from tenor.core.errors import TypeMismatchError as TypeMismatchError
from tenor.core.errors import UnknownPropertyError as UnknownPropertyError
from tenor.core.errors import UnsupportedOperationError as UnsupportedOperationError
from tenor.core.errors import ValidationError as ValidationError
from tenor.core.money import Currency as Currency
from tenor.core.money import Money as Money
from tenor.core.result import Err as Err
from tenor.core.result import Ok as Ok
from tenor.core.result import Result as Result
from tenor.core.result import sequence as sequence
from tenor.core.result import unwrap as unwrap
from tenor.core.serialization import canonical_bytes as canonical_bytes
from tenor.core.serialization import stable_hash as stable_hash
from tenor.core.types import BusinessDayConvention as BusinessDayConvention
from tenor.core.types import DayCountConvention as DayCountConvention
from tenor.core.types import Period as Period
from tenor.core.types import UtcDatetime as UtcDatetime
