import asyncio

import pytest

from src.domain.account import AccountType
from src.domain.base.ports.import_service_port import ImportService
from src.domain.core.exceptions import ImportFailedError, NoImportRouteError
from src.infrastructure.imports import ImportComposite, RoutingImportComposite


def test_composite_is_an_import_service():
    assert isinstance(ImportComposite(), ImportService)
    assert isinstance(RoutingImportComposite({}), ImportService)


def test_composite_calls_every_delegate_in_order(make_recorder, data_parent):
    # Arrange
    calls = []
    first = make_recorder("first", calls)
    second = make_recorder("second", calls)
    third = make_recorder("third", calls)
    composite = ImportComposite([first, second, third])
    account = data_parent.create_account()

    # Act
    asyncio.run(composite.import_account(account))

    # Assert
    assert calls == ["first", "second", "third"]
    assert first.imported == second.imported == third.imported == [account.id]


def test_empty_composite_does_nothing(data_parent):
    composite = ImportComposite()

    asyncio.run(composite.import_account(data_parent.create_account()))

    assert len(composite) == 0


def test_composite_stops_at_first_failure(make_recorder, data_parent):
    # Arrange
    calls = []
    error = ImportFailedError("second", "acc-1", "boom")
    composite = ImportComposite([
        make_recorder("first", calls),
        make_recorder("second", calls, error=error),
        make_recorder("third", calls),
    ])

    # Act & Assert
    with pytest.raises(ImportFailedError):
        asyncio.run(composite.import_account(data_parent.create_account()))
    assert calls == ["first", "second"]


def test_composite_add_appends_delegate(make_recorder):
    first = make_recorder("first")
    second = make_recorder("second")

    composite = ImportComposite([first]).add(second)

    assert composite.delegates == (first, second)


def test_composites_nest(make_recorder, data_parent):
    # Arrange
    calls = []
    inner = ImportComposite([make_recorder("a", calls), make_recorder("b", calls)])
    outer = ImportComposite([inner, make_recorder("c", calls)])

    # Act
    asyncio.run(outer.import_account(data_parent.create_account()))

    # Assert
    assert calls == ["a", "b", "c"]


def test_routing_composite_dispatches_to_one_delegate(make_recorder, data_parent):
    # Arrange
    calls = []
    personal = make_recorder("personal", calls)
    business = make_recorder("business", calls)
    composite = RoutingImportComposite({
        AccountType.PERSONAL: personal,
        AccountType.BUSINESS: business,
    })
    account = data_parent.create_account(account_type=AccountType.BUSINESS)

    # Act
    asyncio.run(composite.import_account(account))

    # Assert
    assert calls == ["business"]
    assert business.imported == [account.id]
    assert personal.imported == []


def test_routing_composite_falls_back_to_default(make_recorder, data_parent):
    default = make_recorder("default")
    composite = RoutingImportComposite({AccountType.PERSONAL: make_recorder()}, default=default)
    account = data_parent.create_account(account_type=AccountType.TRIAL)

    asyncio.run(composite.import_account(account))

    assert default.imported == [account.id]


def test_routing_composite_without_route_raises(make_recorder, data_parent):
    composite = RoutingImportComposite({AccountType.PERSONAL: make_recorder()})
    account = data_parent.create_account(account_type=AccountType.TRIAL)

    with pytest.raises(NoImportRouteError) as exc_info:
        asyncio.run(composite.import_account(account))
    assert exc_info.value.account_type == "trial"
