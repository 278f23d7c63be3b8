"""Tests for tenor.bean.meta — MetaBean, MetaProperty and the registry."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import final

import pytest

from tenor.bean.bean import ImmutableBean
from tenor.bean.builder import BeanBuilder
from tenor.bean.meta import lookup_meta_bean, meta_bean, registered_beans
from tenor.bean.property import conforms
from tenor.core.errors import UnknownPropertyError, UnsupportedOperationError
from tenor.core.result import Err, Ok, unwrap
from tenor.core.types import BusinessDayConvention, Period
from tenor.swap.calculation import OvernightRateCalculation
from tenor.swap.leg import OvernightRateSwapLeg
from tenor.swap.payment import PaymentSchedule
from tenor.swap.schedule import PeriodicSchedule


@final
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class Fixing(ImmutableBean):
    """Small bean used to exercise optional and defaulted properties."""

    fixing_date: date
    rate: Decimal
    source: str | None = None
    tags: tuple[str, ...] = ()


class TestMetaBeanShape:
    def test_property_order_is_declaration_order(self) -> None:
        assert OvernightRateSwapLeg.meta_bean().property_names() == (
            "accrual_periods", "payment_periods", "calculation",
        )

    def test_descriptor_types(self) -> None:
        meta = meta_bean(OvernightRateSwapLeg)
        types = [p.value_type for p in meta.meta_properties()]
        assert types == [PeriodicSchedule, PaymentSchedule, OvernightRateCalculation]

    def test_declaring_type(self) -> None:
        meta = meta_bean(OvernightRateSwapLeg)
        assert all(p.declaring_type is OvernightRateSwapLeg for p in meta.meta_properties())

    def test_bean_name_and_type(self) -> None:
        meta = meta_bean(Fixing)
        assert meta.bean_name == "Fixing"
        assert meta.bean_type is Fixing
        assert repr(meta) == "MetaBean:Fixing"

    def test_required_and_defaults(self) -> None:
        meta = meta_bean(Fixing)
        assert meta["fixing_date"].required
        assert not meta["source"].required
        assert meta["tags"].has_default
        assert meta["tags"].default_value() == ()
        assert meta["rate"].default_value() is None

    def test_contains(self) -> None:
        meta = meta_bean(Fixing)
        assert "rate" in meta
        assert "notional" not in meta

    def test_property_repr(self) -> None:
        assert repr(meta_bean(Fixing)["rate"]) == "MetaProperty(Fixing.rate: Decimal)"


class TestIdentity:
    def test_same_object_every_time(self) -> None:
        assert meta_bean(OvernightRateSwapLeg) is OvernightRateSwapLeg.meta_bean()
        assert meta_bean(Fixing) is meta_bean(Fixing)

    def test_descriptors_are_shared(self) -> None:
        a = meta_bean(Fixing).resolve("rate")
        b = meta_bean(Fixing).resolve("rate")
        assert unwrap(a) is unwrap(b)

    def test_concurrent_first_use(self) -> None:
        @final
        @dataclass(frozen=True, slots=True, eq=False, repr=False)
        class Quote(ImmutableBean):
            bid: int
            ask: int

        barrier = threading.Barrier(8)
        seen: list[object] = []
        lock = threading.Lock()

        def worker() -> None:
            barrier.wait()
            meta = meta_bean(Quote)
            with lock:
                seen.append(meta)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len(seen) == 8
        assert all(m is seen[0] for m in seen)

    def test_non_dataclass_rejected(self) -> None:
        class Plain:
            pass

        with pytest.raises(TypeError, match="dataclass"):
            meta_bean(Plain)


class TestGenericAccess:
    def test_resolve_unknown(self) -> None:
        result = meta_bean(Fixing).resolve("notional")
        assert isinstance(result, Err)
        assert isinstance(result.error, UnknownPropertyError)
        assert result.error.bean_name == "Fixing"
        assert result.error.property_name == "notional"

    def test_get(self) -> None:
        fixing = Fixing(fixing_date=date(2025, 3, 3), rate=Decimal("0.0425"))
        assert meta_bean(Fixing).get(fixing, "rate") == Ok(Decimal("0.0425"))
        assert fixing.get_property("source") == Ok(None)

    def test_get_unknown(self) -> None:
        fixing = Fixing(fixing_date=date(2025, 3, 3), rate=Decimal("0.0425"))
        assert isinstance(fixing.get_property("notional"), Err)

    def test_set_on_bean_is_unsupported(self) -> None:
        fixing = Fixing(fixing_date=date(2025, 3, 3), rate=Decimal("0.0425"))
        result = meta_bean(Fixing).set(fixing, "rate", Decimal("0.05"))
        assert isinstance(result, Err)
        assert isinstance(result.error, UnsupportedOperationError)
        assert result.error.code == "BEAN_IMMUTABLE"
        assert fixing.rate == Decimal("0.0425")

    def test_set_on_builder(self) -> None:
        meta = meta_bean(Fixing)
        builder = meta.builder()
        assert isinstance(builder, BeanBuilder)
        assert isinstance(meta.set(builder, "rate", Decimal("0.05")), Ok)
        assert unwrap(builder.get("rate")) == Decimal("0.05")

    def test_set_on_other_beans_builder(self) -> None:
        builder = PaymentSchedule.builder()
        result = meta_bean(Fixing).set(builder, "rate", Decimal("0.05"))
        assert isinstance(result, Err)
        assert isinstance(result.error, UnsupportedOperationError)
        assert result.error.code == "BEAN_BUILDER_MISMATCH"
        assert result.error.target == "PaymentSchedule"
        assert not builder.is_set("payment_frequency")

    def test_set_unknown_on_builder(self) -> None:
        meta = meta_bean(Fixing)
        result = meta.set(meta.builder(), "notional", 1)
        assert isinstance(result, Err)
        assert isinstance(result.error, UnknownPropertyError)


class TestValidate:
    def test_missing_reported_before_type(self) -> None:
        violation = meta_bean(Fixing).validate({"fixing_date": "oops", "rate": None})
        assert violation is not None
        assert violation.path == "Fixing.rate"
        assert violation.constraint == "must not be None"

    def test_type_violation(self) -> None:
        violation = meta_bean(Fixing).validate({
            "fixing_date": date(2025, 1, 1), "rate": 5, "source": None, "tags": (),
        })
        assert violation is not None
        assert violation.path == "Fixing.rate"
        assert violation.actual_value == "int"

    def test_constructor_enforces_types(self) -> None:
        with pytest.raises(TypeError, match="Fixing.tags"):
            Fixing(fixing_date=date(2025, 1, 1), rate=Decimal("1"), tags=("a", 1))  # type: ignore[arg-type]


class TestRegistry:
    def test_lookup_by_name(self) -> None:
        meta_bean(PeriodicSchedule)
        assert lookup_meta_bean("PeriodicSchedule") == Ok(meta_bean(PeriodicSchedule))
        assert "PeriodicSchedule" in registered_beans()

    def test_lookup_missing(self) -> None:
        result = lookup_meta_bean("NoSuchBean")
        assert isinstance(result, Err)
        assert result.error.code == "BEAN_NOT_REGISTERED"


class TestConforms:
    @pytest.mark.parametrize(
        ("value", "declared", "expected"),
        [
            (1, int, True),
            (True, int, False),
            (None, int | None, True),
            ("M", Period, False),
            (("a", "b"), tuple[str, ...], True),
            (("a", 1), tuple[str, ...], False),
            ((1, "a"), tuple[int, str], True),
            (frozenset({1}), frozenset[int], True),
            (BusinessDayConvention.NONE, BusinessDayConvention, True),
        ],
    )
    def test_conforms(self, value: object, declared: object, expected: bool) -> None:
        assert conforms(value, declared) is expected
