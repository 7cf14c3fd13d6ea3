import pytest

from atomic_counter.errors import ConfigError, InvalidFormError
from atomic_counter.events import Action, EventLog
from atomic_counter.service import CounterService, CounterView, Intent, SetupView

ANN = "name=Ann; team=plus"
BOB = "name=Bob; team=minus"


def test_render_without_session_shows_setup(service):
    assert isinstance(service.render(None), SetupView)
    assert isinstance(service.render("name=Ann"), SetupView)


def test_render_with_session_shows_counter(service):
    service.apply("perform_action=true", ANN)

    view = service.render("name=Ann%20Lee; team=plus")

    assert isinstance(view, CounterView)
    assert view.name == "Ann Lee"
    assert view.team == "plus"
    assert view.increments is True
    assert view.value == 1
    assert [event.name for event in view.events] == ["Ann"]


def test_render_does_not_mutate(service):
    service.render(ANN)
    service.render(None)

    assert service.value == 0
    assert service.events() == []


def test_identify_issues_cookies_without_mutation(service):
    result = service.apply("name=Ann+Lee&team=plus", None)

    assert result.intent is Intent.IDENTIFY
    assert result.status_code == 302
    assert result.location == "/"
    assert result.cookies == [
        "name=Ann%20Lee; Path=/; Max-Age=3600",
        "team=plus; Path=/; Max-Age=3600",
    ]
    assert service.value == 0
    assert service.events() == []


def test_identify_uses_configured_cookie_lifetime():
    service = CounterService(session_max_age=60)

    result = service.apply("name=Ann&team=minus", None)

    assert all(cookie.endswith("Max-Age=60") for cookie in result.cookies)


def test_act_plus_increments_and_records(service):
    result = service.apply("perform_action=true", ANN)

    assert result.intent is Intent.ACT
    assert result.cookies == []
    assert service.value == 1
    head = service.events()[0]
    assert (head.name, head.action, head.value) == ("Ann", Action.INCREMENT, 1)
    assert result.event == head


def test_act_minus_decrements_and_records(service):
    service.apply("perform_action=true", BOB)
    service.apply("perform_action=true", BOB)

    assert service.value == -2
    assert [(e.name, e.action, e.value) for e in service.events()] == [
        ("Bob", Action.DECREMENT, -2),
        ("Bob", Action.DECREMENT, -1),
    ]


def test_act_reads_identity_from_cookies_not_form(service):
    service.apply("perform_action=true&name=Mallory&team=plus", BOB)

    assert service.value == -1
    assert service.events()[0].name == "Bob"


def test_act_without_session_is_a_noop(service):
    result = service.apply("perform_action=true", "name=Ann")

    assert result.intent is Intent.ACT
    assert result.location == "/"
    assert result.event is None
    assert service.value == 0
    assert service.events() == []


def test_act_with_unknown_team_decrements(service):
    # Permissive default: any team other than "plus" takes the decrement path.
    service.apply("perform_action=true", "name=Eve; team=zero")

    assert service.value == -1
    assert service.events()[0].action is Action.DECREMENT


def test_action_flag_dominates_identity_fields(service):
    result = service.apply("name=Ann&team=plus&perform_action=", ANN)

    assert result.intent is Intent.ACT
    assert result.cookies == []
    assert service.value == 1


@pytest.mark.parametrize(
    "body",
    ["", "name=Ann", "team=plus", "name=&team=plus", "name=Ann&team=", "perform_action"],
)
def test_malformed_body_raises_without_mutation(service, body):
    service.apply("perform_action=true", ANN)

    with pytest.raises(InvalidFormError) as excinfo:
        service.apply(body, ANN)

    assert excinfo.value.status_code == 400
    assert str(excinfo.value) == "Invalid form data"
    assert service.value == 1
    assert len(service.events()) == 1


def test_history_is_capped(service):
    for _ in range(7):
        service.apply("perform_action=true", ANN)

    assert [event.value for event in service.events()] == [7, 6, 5, 4, 3]


def test_history_size_is_configurable():
    service = CounterService(history_size=2)
    for _ in range(3):
        service.apply("perform_action=true", ANN)

    assert len(service.events()) == 2


def test_history_size_must_be_positive():
    with pytest.raises(ConfigError):
        CounterService(history_size=0)


@pytest.mark.parametrize(
    "team",
    ["plus%3B", "plus;Domain=evil", "plus\r\nX-Injected:1", "plus\ufffd", "plus🫖", "plus minus"],
)
def test_identify_rejects_unsafe_team(service, team):
    with pytest.raises(InvalidFormError):
        service.apply(f"name=Ann&team={team}", None)

    assert service.value == 0


def test_identify_accepts_unknown_but_cookie_safe_team(service):
    result = service.apply("name=Ann&team=zero", None)

    assert result.cookies[1] == "team=zero; Path=/; Max-Age=3600"


def test_events_and_history_size_are_exclusive():
    with pytest.raises(ConfigError):
        CounterService(events=EventLog(), history_size=3)
