"""Data-driven description of a platform's URL dialect.

Each engine declares its hosts, an ordered table of :class:`PathRule` entries, an
identifier shape predicate, and a query-parameter policy. :class:`PlatformDialect`
runs the shared strict pipeline over that table:

1. reject empty or non-string input
2. coerce or reject a missing scheme (``allow_no_protocol``)
3. parse, rejecting malformed syntax
4. check the ``www``-stripped host against the allow-list
5. locate an identifier with the first applicable path rule
6. check the identifier shape
7. apply the query-parameter policy (``allow_query_params``)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Iterable, Optional, Tuple

from vidkit.models.options import OptionsLike, resolve_options
from vidkit.models.platform import Platform
from vidkit.utils.validation import ParsedURL, try_parse_url


@dataclass(frozen=True, slots=True)
class Candidate:
    """Identifier (and optional username) located by a path rule, not yet validated."""

    video_id: Optional[str]
    username: Optional[str] = None


@dataclass(frozen=True, slots=True)
class PathRule:
    """One recognised URL shape.

    ``extract`` returns ``None`` when the rule does not apply to the URL. A rule that
    applies but finds no identifier returns ``Candidate(None)``; this ends the search,
    so later rules are never consulted for that URL.
    """

    form: str
    hosts: FrozenSet[str]
    extract: Callable[[ParsedURL], Optional[Candidate]]


@dataclass(frozen=True, slots=True)
class VideoMatch:
    """A URL that passed the full strict pipeline."""

    platform: Platform
    form: str
    video_id: str
    username: Optional[str]
    url: ParsedURL


@dataclass(frozen=True)
class PlatformDialect:
    """Host allow-list, path rules, and predicates for one platform."""

    platform: Platform
    hosts: FrozenSet[str]
    www_hosts: FrozenSet[str]
    rules: Tuple[PathRule, ...]
    is_valid_video_id: Callable[[str], bool]
    accepts_query: Callable[[ParsedURL], bool]

    @property
    def forms(self) -> FrozenSet[str]:
        return frozenset(rule.form for rule in self.rules)

    def locate(self, url: ParsedURL, forms: Optional[Iterable[str]] = None) -> Optional[Tuple[str, Candidate]]:
        """Return ``(form, candidate)`` for the first rule that applies to ``url``."""

        allowed = self.forms if forms is None else frozenset(forms)
        for rule in self.rules:
            if rule.form not in allowed or url.hostname not in rule.hosts:
                continue
            candidate = rule.extract(url)
            if candidate is not None:
                return rule.form, candidate
        return None

    def match(
        self,
        url: object,
        options: OptionsLike = None,
        *,
        forms: Optional[Iterable[str]] = None,
    ) -> Optional[VideoMatch]:
        """Run the strict pipeline and return the match, or ``None`` on any rejection."""

        resolved = resolve_options(options)
        parsed = try_parse_url(url, allow_no_protocol=resolved.allow_no_protocol)
        if parsed is None or parsed.hostname not in self.hosts:
            return None
        if not resolved.allow_no_www and parsed.hostname in self.www_hosts and parsed.raw_hostname == parsed.hostname:
            return None

        located = self.locate(parsed, forms)
        if located is None:
            return None
        form, candidate = located
        if not candidate.video_id or not self.is_valid_video_id(candidate.video_id):
            return None

        if not resolved.allow_query_params and not self.accepts_query(parsed):
            return None

        return VideoMatch(
            platform=self.platform,
            form=form,
            video_id=candidate.video_id,
            username=candidate.username,
            url=parsed,
        )


__all__ = ["Candidate", "PathRule", "PlatformDialect", "VideoMatch"]
