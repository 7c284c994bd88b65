"""Options controlling how strictly URLs are validated."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Union

from pydantic import ConfigDict, Field

from vidkit.models.base import VidkitBaseModel


class URLValidationOptions(VidkitBaseModel):
    """Strictness switches accepted by the validating and extracting operations.

    Field names are snake_case; the camelCase spellings (``allowNoProtocol`` and
    friends) are accepted as aliases when building from a mapping.
    """

    allow_no_protocol: bool = Field(default=True, alias="allowNoProtocol")
    """Accept input without ``http(s)://`` by assuming ``https://``."""

    allow_no_www: bool = Field(default=True, alias="allowNoWWW")
    """Accept ``youtube.com`` / ``tiktok.com`` written without the ``www.`` label."""

    allow_query_params: bool = Field(default=True, alias="allowQueryParams")
    """Accept query parameters beyond the ones the platform needs."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


OptionsLike = Union[URLValidationOptions, Mapping[str, Any], None]

DEFAULT_OPTIONS = URLValidationOptions()


def resolve_options(options: OptionsLike = None) -> URLValidationOptions:
    """Return a :class:`URLValidationOptions` for an instance, mapping, or ``None``."""

    if options is None:
        return DEFAULT_OPTIONS
    if isinstance(options, URLValidationOptions):
        return options
    return URLValidationOptions.model_validate(dict(options))


def merge_options(base: Optional[URLValidationOptions], **overrides: Optional[bool]) -> URLValidationOptions:
    """Copy ``base`` with every non-``None`` override applied."""

    resolved = base or DEFAULT_OPTIONS
    updates = {name: value for name, value in overrides.items() if value is not None}
    return resolved.model_copy(update=updates) if updates else resolved


__all__ = ["DEFAULT_OPTIONS", "OptionsLike", "URLValidationOptions", "merge_options", "resolve_options"]
