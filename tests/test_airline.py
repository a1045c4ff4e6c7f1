import pytest

from structkit.airline import (
    SAMPLE_TICKETS,
    Airline,
    Cabin,
    DeltaCalculator,
    SouthwestCalculator,
    UnitedCalculator,
    calculator_for,
    main,
    parse_ticket,
    process_tickets,
)


def test_united_premium_sample():
    assert process_tickets(["United 150.0 Premium"]) == [pytest.approx(137.5)]


def test_united_economy():
    assert UnitedCalculator().cost(Cabin.ECONOMY, 120.0) == pytest.approx(90.0)


def test_delta_business():
    assert DeltaCalculator().cost(Cabin.BUSINESS, 60.0) == pytest.approx(95.0)


@pytest.mark.parametrize("airline", [Airline.UNITED, Airline.DELTA])
@pytest.mark.parametrize("miles", [0.0, 60.0, 1234.5])
def test_premium_adds_fixed_surcharge(airline, miles):
    calc = calculator_for(airline)
    assert calc.cost(Cabin.PREMIUM, miles) - calc.cost(Cabin.ECONOMY, miles) == pytest.approx(25.0)


@pytest.mark.parametrize("cabin", list(Cabin))
def test_southwest_charges_distance_only(cabin):
    assert SouthwestCalculator().cost(cabin, 4000.0) == 4000.0


def test_calculator_for_picks_the_airline():
    assert calculator_for(Airline.DELTA).cost(Cabin.BUSINESS, 60.0) == pytest.approx(95.0)
    assert calculator_for(Airline.UNITED).cost(Cabin.ECONOMY, 120.0) == pytest.approx(90.0)
    assert calculator_for(Airline.SOUTHWEST).cost(Cabin.BUSINESS, 4000.0) == pytest.approx(4000.0)


def test_calculator_is_shared():
    first = calculator_for(Airline.DELTA)
    second = calculator_for(Airline.DELTA)
    assert first is second
    assert second.cost(Cabin.PREMIUM, 60.0) == pytest.approx(55.0)


def test_parse_ticket_ignores_case_and_extra_spaces():
    assert parse_ticket("  SouthWest   1000.0  Economy ") == (
        Airline.SOUTHWEST,
        1000.0,
        Cabin.ECONOMY,
    )


@pytest.mark.parametrize(
    "line",
    ["United 150.0", "Acme 10 economy", "Delta far economy", "Delta 10 cargo", ""],
)
def test_parse_ticket_rejects_bad_lines(line):
    with pytest.raises(ValueError):
        parse_ticket(line)


def test_process_tickets_keeps_order():
    costs = process_tickets(["Delta 60.0 economy", "Delta 60.0 premium"])
    assert costs[1] - costs[0] == pytest.approx(25.0)


def test_main_prints_one_line_per_sample(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == len(SAMPLE_TICKETS)
    assert lines[-1] == "4000"


def test_main_with_given_ticket(capsys):
    assert main(["Delta 60.0 economy"]) == 0
    expected = process_tickets(["Delta 60.0 economy"])[0]
    assert capsys.readouterr().out.strip() == f"{expected:g}"