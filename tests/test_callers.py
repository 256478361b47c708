import pytest

from worker.callers import CallerIdentity, WordPressAgentMatcher, get_caller_matcher


def test_parses_wordpress_agent():
    identity = WordPressAgentMatcher()("WordPress/6.1; example.com")

    assert identity == CallerIdentity(client_name="6.1", site_identifier="example.com")


def test_keeps_only_the_second_segment_as_site():
    identity = WordPressAgentMatcher()("WordPress/6.4.2; https://shop.example.com; extra")

    assert identity.client_name == "6.4.2"
    assert identity.site_identifier == "https://shop.example.com"


@pytest.mark.parametrize("agent", [
    "",
    "curl/8.4.0",
    "WordPress/6.1",
    "WordPress/6.1; ",
    "Mozilla/5.0 (X11; Linux x86_64)",
])
def test_rejects_unrecognized_agents(agent):
    assert WordPressAgentMatcher()(agent) is None


def test_matcher_is_loaded_from_settings(settings):
    settings.CALLER_AGENT_MATCHER = "worker.callers.WordPressAgentMatcher"

    assert isinstance(get_caller_matcher(), WordPressAgentMatcher)


def test_plain_function_can_be_plugged_in():
    matcher = get_caller_matcher("tests.test_callers.accept_everything")

    assert matcher("anything") == CallerIdentity("any", "where")


def accept_everything(agent):
    return CallerIdentity("any", "where")
