from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.utils.module_loading import import_string

WORDPRESS_PREFIX = "WordPress/"
SEGMENT_SEPARATOR = "; "


@dataclass(frozen=True)
class CallerIdentity:
    client_name: str
    site_identifier: str


class WordPressAgentMatcher:
    """
    Recognizes the user agent WordPress sends with ``wp_remote_post``,
    e.g. ``WordPress/6.1; https://example.com``.
    """

    def __call__(self, agent: str) -> Optional[CallerIdentity]:
        if not agent or WORDPRESS_PREFIX not in agent:
            return None

        segments = agent.split(SEGMENT_SEPARATOR)
        if len(segments) < 2 or not segments[1].strip():
            return None

        return CallerIdentity(
            client_name=segments[0].replace(WORDPRESS_PREFIX, "", 1),
            site_identifier=segments[1],
        )


def get_caller_matcher(path=None):
    matcher = import_string(path or settings.CALLER_AGENT_MATCHER)
    # Accept both matcher classes and plain functions
    return matcher() if isinstance(matcher, type) else matcher
