"""tenor.swap — overnight rate swap leg and its expansion."""

from tenor.swap.calculation import OvernightAccrualCalculator as OvernightAccrualCalculator
from tenor.swap.calculation import OvernightAccrualMethod as OvernightAccrualMethod
from tenor.swap.calculation import OvernightIndex as OvernightIndex
from tenor.swap.calculation import OvernightRateCalculation as OvernightRateCalculation
from tenor.swap.calculation import OvernightRateObservation as OvernightRateObservation
from tenor.swap.calculation import RateAccrualPeriod as RateAccrualPeriod
from tenor.swap.expanded import ExpandedSwapLeg as ExpandedSwapLeg
from tenor.swap.expanded import NotionalExchange as NotionalExchange
from tenor.swap.expansion import AccrualCalculator as AccrualCalculator
from tenor.swap.expansion import AccrualScheduleSource as AccrualScheduleSource
from tenor.swap.expansion import PaymentPeriodAssembler as PaymentPeriodAssembler
from tenor.swap.expansion import SwapLegExpander as SwapLegExpander
from tenor.swap.expansion import expand as expand
from tenor.swap.leg import OvernightRateSwapLeg as OvernightRateSwapLeg
from tenor.swap.payment import CompoundingMethod as CompoundingMethod
from tenor.swap.payment import PaymentPeriod as PaymentPeriod
from tenor.swap.payment import PaymentRelativeTo as PaymentRelativeTo
from tenor.swap.payment import PaymentSchedule as PaymentSchedule
from tenor.swap.payment import PaymentScheduleAssembler as PaymentScheduleAssembler
from tenor.swap.schedule import PeriodicSchedule as PeriodicSchedule
from tenor.swap.schedule import PeriodicScheduleMaterializer as PeriodicScheduleMaterializer
from tenor.swap.schedule import Schedule as Schedule
from tenor.swap.schedule import SchedulePeriod as SchedulePeriod
from tenor.swap.schedule import StubConvention as StubConvention
