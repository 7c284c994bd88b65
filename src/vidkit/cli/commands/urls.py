"""CLI commands for inspecting, normalising, converting, and sharing video URLs."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional

import typer
from rich.console import Console
from rich.table import Table

from vidkit.config.settings import Settings, UnknownProfileError, get_settings
from vidkit.models.options import URLValidationOptions, merge_options
from vidkit.models.platform import Platform
from vidkit.models.youtube import YouTubeURLComponents
from vidkit.services.detection import detect_platform
from vidkit.services.tiktok import (
    InvalidTikTokVideoIdError,
    generate_tiktok_share_url,
    get_tiktok_video_id,
    is_valid_tiktok_video_url,
    normalize_tiktok_video_url,
)
from vidkit.services.youtube import (
    generate_youtube_share_url,
    get_youtube_video_id,
    is_valid_youtube_video_url,
    is_youtube_url,
    normalize_youtube_video_url,
    parse_youtube_url,
    to_youtube_embed_url,
    to_youtube_short_url,
)


class VidkitExitCode:
    """Mapping of meaningful CLI exit codes."""

    SUCCESS = 0
    INVALID_INPUT = 1
    UNSUPPORTED_PLATFORM = 2


class ConvertTarget(str, Enum):
    """YouTube URL forms reachable through ``vidkit convert``."""

    EMBED = "embed"
    SHORT = "short"


@dataclass(slots=True)
class InspectionReport:
    """Outcome of running every engine operation for one URL."""

    url: str
    platform: str
    valid: bool
    video_id: Optional[str]
    canonical_url: Optional[str]


_VALIDATORS: Dict[Platform, Callable[[str, URLValidationOptions], bool]] = {
    Platform.YOUTUBE: is_valid_youtube_video_url,
    Platform.TIKTOK: is_valid_tiktok_video_url,
}
_EXTRACTORS: Dict[Platform, Callable[[str, URLValidationOptions], Optional[str]]] = {
    Platform.YOUTUBE: get_youtube_video_id,
    Platform.TIKTOK: get_tiktok_video_id,
}
_NORMALIZERS: Dict[Platform, Callable[[str], Optional[str]]] = {
    Platform.YOUTUBE: normalize_youtube_video_url,
    Platform.TIKTOK: normalize_tiktok_video_url,
}
_CONVERTERS: Dict[ConvertTarget, Callable[[str], Optional[str]]] = {
    ConvertTarget.EMBED: to_youtube_embed_url,
    ConvertTarget.SHORT: to_youtube_short_url,
}


def inspect_url(url: str, platform: Platform, options: URLValidationOptions) -> InspectionReport:
    """Run validation, extraction, and normalisation for ``url`` on ``platform``."""

    return InspectionReport(
        url=url,
        platform=platform.value,
        valid=_VALIDATORS[platform](url, options),
        video_id=_EXTRACTORS[platform](url, options),
        canonical_url=_NORMALIZERS[platform](url),
    )


def parse_share_params(raw_params: List[str]) -> Dict[str, str]:
    """Turn ``key=value`` strings into an insertion-ordered mapping."""

    params: Dict[str, str] = {}
    for raw in raw_params:
        key, sep, value = raw.partition("=")
        if not sep or not key:
            raise ValueError(f"Share parameters must look like key=value, got {raw!r}")
        params[key] = value
    return params


def register(app: typer.Typer, console: Console) -> None:
    """Register the URL commands on ``app``."""

    def load_settings(verbose: bool) -> Settings:
        settings = get_settings()
        if verbose or settings.debug:
            console.log(f"Settings: log_level={settings.log_level} profiles={sorted(settings.profile_config.profiles)}")
        return settings

    def require_platform(url: str, verbose: bool) -> Platform:
        platform = detect_platform(url)
        if platform is None:
            console.print(f"[red]Error:[/red] Unsupported or unrecognised URL: {url}")
            raise typer.Exit(code=VidkitExitCode.UNSUPPORTED_PLATFORM)
        if verbose:
            console.log(f"Detected platform: {platform.value}")
        return platform

    @app.command("inspect")
    def inspect(  # pylint: disable=too-many-arguments
        url: str = typer.Argument(..., help="Video URL to inspect"),
        profile: Optional[str] = typer.Option(None, "--profile", "-p", help="Named validation profile"),
        strict_protocol: bool = typer.Option(
            False, "--strict-protocol", "--require-protocol", help="Reject URLs without http(s)://"
        ),
        require_www: bool = typer.Option(False, "--require-www", help="Reject youtube.com/tiktok.com without www."),
        no_query_params: bool = typer.Option(False, "--no-query-params", help="Reject extra query parameters"),
        json_output: bool = typer.Option(False, "--json", help="Output the report as JSON"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log resolved options"),
    ) -> None:
        settings = load_settings(verbose)
        try:
            base = settings.resolve_profile(profile)
        except UnknownProfileError:
            console.print(f"[red]Error:[/red] Unknown profile: {profile}")
            raise typer.Exit(code=VidkitExitCode.INVALID_INPUT) from None

        options = merge_options(
            base,
            allow_no_protocol=False if strict_protocol else None,
            allow_no_www=False if require_www else None,
            allow_query_params=False if no_query_params else None,
        )
        if verbose or settings.debug:
            console.log(f"Validation options: {options.model_dump()}")

        platform = require_platform(url, verbose or settings.debug)
        report = inspect_url(url, platform, options)

        if json_output:
            typer.echo(json.dumps(asdict(report), ensure_ascii=False, indent=2))
        else:
            _render_report(console, report)

        if report.video_id is None:
            raise typer.Exit(code=VidkitExitCode.INVALID_INPUT)

    @app.command("normalize")
    def normalize(
        url: str = typer.Argument(..., help="Video URL to normalise"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Log the detected platform"),
    ) -> None:
        settings = load_settings(verbose)
        platform = require_platform(url, verbose or settings.debug)
        canonical = _NORMALIZERS[platform](url)
        if canonical is None:
            console.print(f"[red]Error:[/red] No valid {platform.value} video id found in {url}")
            raise typer.Exit(code=VidkitExitCode.INVALID_INPUT)
        typer.echo(canonical)

    @app.command("parse")
    def parse(
        url: str = typer.Argument(..., help="YouTube URL to classify"),
        json_output: bool = typer.Option(False, "--json", help="Output the components as JSON"),
    ) -> None:
        if not is_youtube_url(url):
            console.print(f"[red]Error:[/red] Not a YouTube URL: {url}")
            raise typer.Exit(code=VidkitExitCode.UNSUPPORTED_PLATFORM)

        components = parse_youtube_url(url)
        if json_output:
            typer.echo(json.dumps(components.model_dump(mode="json"), ensure_ascii=False, indent=2))
            return
        _render_components(console, components)

    @app.command("convert")
    def convert(
        url: str = typer.Argument(..., help="YouTube URL to convert"),
        target: ConvertTarget = typer.Option(..., "--to", case_sensitive=False, help="Target URL form"),
    ) -> None:
        if not is_youtube_url(url):
            console.print(f"[red]Error:[/red] Not a YouTube URL: {url}")
            raise typer.Exit(code=VidkitExitCode.UNSUPPORTED_PLATFORM)

        converted = _CONVERTERS[target](url)
        if converted is None:
            console.print(f"[red]Error:[/red] No valid YouTube video id found in {url}")
            raise typer.Exit(code=VidkitExitCode.INVALID_INPUT)
        typer.echo(converted)

    @app.command("share")
    def share(
        video_id: str = typer.Argument(..., help="Video identifier"),
        platform: Platform = typer.Option(Platform.YOUTUBE, "--platform", case_sensitive=False, help="Target platform"),
        param: Optional[List[str]] = typer.Option(None, "--param", help="Extra key=value query parameter (YouTube only)"),
    ) -> None:
        try:
            params = parse_share_params(param or [])
        except ValueError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=VidkitExitCode.INVALID_INPUT) from exc

        if platform is Platform.YOUTUBE:
            typer.echo(generate_youtube_share_url(video_id, params))
            return

        if params:
            console.print("[red]Error:[/red] TikTok share links do not take parameters")
            raise typer.Exit(code=VidkitExitCode.INVALID_INPUT)
        try:
            typer.echo(generate_tiktok_share_url(video_id))
        except InvalidTikTokVideoIdError as exc:
            console.print(f"[red]Error:[/red] {exc}")
            raise typer.Exit(code=VidkitExitCode.INVALID_INPUT) from exc


def _render_report(console: Console, report: InspectionReport) -> None:
    table = Table(title="URL Inspection", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("URL", report.url)
    table.add_row("Platform", report.platform)
    table.add_row("Valid", "[green]yes[/green]" if report.valid else "[red]no[/red]")
    table.add_row("Video ID", report.video_id or "n/a")
    table.add_row("Canonical URL", report.canonical_url or "n/a")
    console.print(table)


def _render_components(console: Console, components: YouTubeURLComponents) -> None:
    table = Table(title="YouTube URL Components", show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Type", components.type.value)
    table.add_row("Video ID", components.video_id or "n/a")
    table.add_row("Playlist ID", components.playlist_id or "n/a")
    table.add_row("Channel ID", components.channel_id or "n/a")
    table.add_row("Embed", "yes" if components.is_embed else "no")
    table.add_row("Parameters", _format_parameters(components.parameters))
    console.print(table)


def _format_parameters(parameters: Mapping[str, str]) -> str:
    if not parameters:
        return "n/a"
    return ", ".join(f"{key}={value}" for key, value in parameters.items())


__all__ = ["ConvertTarget", "InspectionReport", "VidkitExitCode", "inspect_url", "parse_share_params", "register"]
