"""Repository configuration read from ``triagebot.toml``."""

from __future__ import annotations

import enum
import logging
import threading
import time
import tomllib
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "triagebot.toml"
REFRESH_EVERY = 120.0  # seconds

_REQUIRED = object()


def _path(where: str, key: str) -> str:
    return f"{where}.{key}" if where else key


def _expect_table(value: Any, where: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ValueError(f"invalid type for `{where}`: expected a table")
    return value


def _expect_str(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ValueError(f"invalid type for `{where}`: expected a string")
    return value


def _expect_bool(value: Any, where: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"invalid type for `{where}`: expected a boolean")
    return value


def _expect_u64(value: Any, where: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"invalid type for `{where}`: expected an integer")
    if not 0 <= value < 2**64:
        raise ValueError(f"invalid value for `{where}`: expected an unsigned 64-bit integer")
    return value


def _expect_str_list(value: Any, where: str) -> tuple[str, ...]:
    if not isinstance(value, list):
        raise ValueError(f"invalid type for `{where}`: expected an array")
    return tuple(_expect_str(item, f"{where}[{pos}]") for pos, item in enumerate(value))


class _Fields:
    """Reads typed fields out of one TOML table."""

    def __init__(self, table: Any, where: str) -> None:
        self.table = _expect_table(table, where or "configuration")
        self.where = where

    def _raw(self, key: str, default: Any) -> Any:
        if key in self.table:
            return self.table[key]
        if default is _REQUIRED:
            raise ValueError(f"missing field `{key}` in `{self.where or 'configuration'}`")
        return default

    def string(self, key: str, default: Any = _REQUIRED) -> str:
        value = self._raw(key, default)
        return value if key not in self.table else _expect_str(value, _path(self.where, key))

    def optional_string(self, key: str) -> str | None:
        return self.string(key, None)

    def boolean(self, key: str, default: bool = False) -> bool:
        if key not in self.table:
            return default
        return _expect_bool(self.table[key], _path(self.where, key))

    def unsigned(self, key: str) -> int:
        return _expect_u64(self._raw(key, _REQUIRED), _path(self.where, key))

    def string_list(self, key: str, default: Any = ()) -> tuple[str, ...]:
        if key not in self.table:
            return self._raw(key, default)
        return _expect_str_list(self.table[key], _path(self.where, key))

    def string_set(self, key: str) -> frozenset[str]:
        return frozenset(self.string_list(key))

    def string_map(self, key: str) -> dict[str, str]:
        where = _path(self.where, key)
        table = _expect_table(self._raw(key, _REQUIRED), where)
        return {name: _expect_str(value, _path(where, name)) for name, value in table.items()}

    def string_list_map(self, key: str) -> dict[str, tuple[str, ...]]:
        if key not in self.table:
            return {}
        where = _path(self.where, key)
        table = _expect_table(self.table[key], where)
        return {
            name: _expect_str_list(value, _path(where, name)) for name, value in table.items()
        }


class ChangelogFormat(enum.Enum):
    RUSTC = "rustc"


@dataclass(frozen=True)
class NominateConfig:
    """Maps a team name to the label used when nominating for it."""

    teams: dict[str, str]

    @classmethod
    def _load(cls, table: Any, where: str) -> NominateConfig:
        return cls(teams=_Fields(table, where).string_map("teams"))


@dataclass(frozen=True)
class PingTeamConfig:
    message: str
    alias: frozenset[str] = frozenset()
    label: str | None = None

    @classmethod
    def _load(cls, table: Any, where: str) -> PingTeamConfig:
        fields = _Fields(table, where)
        return cls(
            message=fields.string("message"),
            alias=fields.string_set("alias"),
            label=fields.optional_string("label"),
        )


@dataclass(frozen=True)
class PingConfig:
    """Pingable teams by name; the message gets the cc list appended."""

    teams: dict[str, PingTeamConfig]

    @classmethod
    def _load(cls, table: Any, where: str) -> PingConfig:
        table = _expect_table(table, where)
        return cls(
            teams={
                name: PingTeamConfig._load(value, _path(where, name))
                for name, value in table.items()
            }
        )

    def get_by_name(self, team: str) -> tuple[str, PingTeamConfig] | None:
        """Find a team by its name or, failing that, by one of its aliases."""
        if team in self.teams:
            return team, self.teams[team]
        for name, config in self.teams.items():
            if team in config.alias:
                return name, config
        return None


@dataclass(frozen=True)
class AssignConfig:
    warn_non_default_branch: bool = False
    contributing_url: str | None = None
    adhoc_groups: dict[str, tuple[str, ...]] = field(default_factory=dict)
    owners: dict[str, tuple[str, ...]] = field(default_factory=dict)

    @classmethod
    def _load(cls, table: Any, where: str) -> AssignConfig:
        fields = _Fields(table, where)
        return cls(
            warn_non_default_branch=fields.boolean("warn_non_default_branch"),
            contributing_url=fields.optional_string("contributing_url"),
            adhoc_groups=fields.string_list_map("adhoc_groups"),
            owners=fields.string_list_map("owners"),
        )


@dataclass(frozen=True)
class NoMergesConfig:
    @classmethod
    def _load(cls, table: Any, where: str) -> NoMergesConfig:
        _Fields(table, where)
        return cls()


@dataclass(frozen=True)
class NoteConfig:
    @classmethod
    def _load(cls, table: Any, where: str) -> NoteConfig:
        _Fields(table, where)
        return cls()


@dataclass(frozen=True)
class MentionsPathConfig:
    message: str | None = None
    cc: tuple[str, ...] = ()

    @classmethod
    def _load(cls, table: Any, where: str) -> MentionsPathConfig:
        fields = _Fields(table, where)
        return cls(message=fields.optional_string("message"), cc=fields.string_list("cc"))


@dataclass(frozen=True)
class MentionsConfig:
    paths: dict[str, MentionsPathConfig]

    @classmethod
    def _load(cls, table: Any, where: str) -> MentionsConfig:
        table = _expect_table(table, where)
        return cls(
            paths={
                name: MentionsPathConfig._load(value, _path(where, name))
                for name, value in table.items()
            }
        )


@dataclass(frozen=True)
class RelabelConfig:
    allow_unauthenticated: tuple[str, ...] = ()

    @classmethod
    def _load(cls, table: Any, where: str) -> RelabelConfig:
        fields = _Fields(table, where)
        return cls(allow_unauthenticated=fields.string_list("allow-unauthenticated"))


@dataclass(frozen=True)
class ShortcutConfig:
    @classmethod
    def _load(cls, table: Any, where: str) -> ShortcutConfig:
        _Fields(table, where)
        return cls()


@dataclass(frozen=True)
class PrioritizeConfig:
    label: str

    @classmethod
    def _load(cls, table: Any, where: str) -> PrioritizeConfig:
        return cls(label=_Fields(table, where).string("label"))


@dataclass(frozen=True)
class AutolabelLabelConfig:
    trigger_labels: tuple[str, ...] = ()
    exclude_labels: tuple[str, ...] = ()
    trigger_files: tuple[str, ...] = ()
    new_pr: bool = False

    @classmethod
    def _load(cls, table: Any, where: str) -> AutolabelLabelConfig:
        fields = _Fields(table, where)
        return cls(
            trigger_labels=fields.string_list("trigger_labels"),
            exclude_labels=fields.string_list("exclude_labels"),
            trigger_files=fields.string_list("trigger_files"),
            new_pr=fields.boolean("new_pr"),
        )


@dataclass(frozen=True)
class AutolabelConfig:
    labels: dict[str, AutolabelLabelConfig]

    @classmethod
    def _load(cls, table: Any, where: str) -> AutolabelConfig:
        table = _expect_table(table, where)
        return cls(
            labels={
                name: AutolabelLabelConfig._load(value, _path(where, name))
                for name, value in table.items()
            }
        )

    def get_by_trigger(self, trigger: str) -> list[tuple[str, AutolabelLabelConfig]]:
        """Return the labels whose trigger labels include ``trigger``."""
        return [
            (label, config)
            for label, config in self.labels.items()
            if trigger in config.trigger_labels
        ]


@dataclass(frozen=True)
class NotifyZulipLabelConfig:
    zulip_stream: int
    topic: str
    message_on_add: str | None = None
    message_on_remove: str | None = None
    message_on_close: str | None = None
    message_on_reopen: str | None = None
    required_labels: tuple[str, ...] = ()

    @classmethod
    def _load(cls, table: Any, where: str) -> NotifyZulipLabelConfig:
        fields = _Fields(table, where)
        return cls(
            zulip_stream=fields.unsigned("zulip_stream"),
            topic=fields.string("topic"),
            message_on_add=fields.optional_string("message_on_add"),
            message_on_remove=fields.optional_string("message_on_remove"),
            message_on_close=fields.optional_string("message_on_close"),
            message_on_reopen=fields.optional_string("message_on_reopen"),
            required_labels=fields.string_list("required_labels"),
        )


@dataclass(frozen=True)
class NotifyZulipConfig:
    labels: dict[str, NotifyZulipLabelConfig]

    @classmethod
    def _load(cls, table: Any, where: str) -> NotifyZulipConfig:
        table = _expect_table(table, where)
        return cls(
            labels={
                name: NotifyZulipLabelConfig._load(value, _path(where, name))
                for name, value in table.items()
            }
        )


@dataclass(frozen=True)
class MajorChangeConfig:
    """Labels and Zulip settings for the major change process."""

    zulip_ping: str
    second_label: str
    meeting_label: str
    zulip_stream: int
    enabling_label: str = "major-change"
    accept_label: str = "major-change-accepted"
    open_extra_text: str | None = None

    @classmethod
    def _load(cls, table: Any, where: str) -> MajorChangeConfig:
        fields = _Fields(table, where)
        return cls(
            zulip_ping=fields.string("zulip_ping"),
            enabling_label=fields.string("enabling_label", "major-change"),
            second_label=fields.string("second_label"),
            accept_label=fields.string("accept_label", "major-change-accepted"),
            meeting_label=fields.string("meeting_label"),
            zulip_stream=fields.unsigned("zulip_stream"),
            open_extra_text=fields.optional_string("open_extra_text"),
        )


@dataclass(frozen=True)
class GlacierConfig:
    @classmethod
    def _load(cls, table: Any, where: str) -> GlacierConfig:
        _Fields(table, where)
        return cls()


@dataclass(frozen=True)
class CloseConfig:
    @classmethod
    def _load(cls, table: Any, where: str) -> CloseConfig:
        _Fields(table, where)
        return cls()


@dataclass(frozen=True)
class ReviewSubmittedConfig:
    review_labels: tuple[str, ...]
    reviewed_label: str

    @classmethod
    def _load(cls, table: Any, where: str) -> ReviewSubmittedConfig:
        fields = _Fields(table, where)
        return cls(
            review_labels=fields.string_list("review_labels", _REQUIRED),
            reviewed_label=fields.string("reviewed_label"),
        )


@dataclass(frozen=True)
class GitHubReleasesConfig:
    format: ChangelogFormat
    project_name: str
    changelog_path: str
    changelog_branch: str

    @classmethod
    def _load(cls, table: Any, where: str) -> GitHubReleasesConfig:
        fields = _Fields(table, where)
        raw_format = fields.string("format")
        try:
            changelog_format = ChangelogFormat(raw_format)
        except ValueError:
            raise ValueError(
                f"unknown variant `{raw_format}` for `{_path(where, 'format')}`"
            ) from None
        return cls(
            format=changelog_format,
            project_name=fields.string("project-name"),
            changelog_path=fields.string("changelog-path"),
            changelog_branch=fields.string("changelog-branch"),
        )


_SECTIONS: tuple[tuple[str, str, Any], ...] = (
    ("relabel", "relabel", RelabelConfig),
    ("assign", "assign", AssignConfig),
    ("ping", "ping", PingConfig),
    ("nominate", "nominate", NominateConfig),
    ("prioritize", "prioritize", PrioritizeConfig),
    ("major-change", "major_change", MajorChangeConfig),
    ("glacier", "glacier", GlacierConfig),
    ("close", "close", CloseConfig),
    ("autolabel", "autolabel", AutolabelConfig),
    ("notify-zulip", "notify_zulip", NotifyZulipConfig),
    ("github-releases", "github_releases", GitHubReleasesConfig),
    ("review-submitted", "review_submitted", ReviewSubmittedConfig),
    ("shortcut", "shortcut", ShortcutConfig),
    ("note", "note", NoteConfig),
    ("mentions", "mentions", MentionsConfig),
    ("no-merges", "no_merges", NoMergesConfig),
)


@dataclass(frozen=True)
class Config:
    """A repository's configuration; a section left out disables its feature."""

    relabel: RelabelConfig | None = None
    assign: AssignConfig | None = None
    ping: PingConfig | None = None
    nominate: NominateConfig | None = None
    prioritize: PrioritizeConfig | None = None
    major_change: MajorChangeConfig | None = None
    glacier: GlacierConfig | None = None
    close: CloseConfig | None = None
    autolabel: AutolabelConfig | None = None
    notify_zulip: NotifyZulipConfig | None = None
    github_releases: GitHubReleasesConfig | None = None
    review_submitted: ReviewSubmittedConfig | None = None
    shortcut: ShortcutConfig | None = None
    note: NoteConfig | None = None
    mentions: MentionsConfig | None = None
    no_merges: NoMergesConfig | None = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Config:
        """Build a configuration from parsed TOML; raises ValueError if invalid."""
        table = _expect_table(data, "configuration")
        sections = {
            attribute: section_class._load(table[key], key)
            for key, attribute, section_class in _SECTIONS
            if key in table
        }
        return cls(**sections)


class ConfigurationError(Exception):
    """The configuration of a repository could not be obtained."""


class MissingConfiguration(ConfigurationError):
    def __init__(self) -> None:
        super().__init__(
            "This repository is not enabled to use triagebot.\n"
            f"Add a `{CONFIG_FILE_NAME}` in the root of the default branch to enable it."
        )


class MalformedConfiguration(ConfigurationError):
    def __init__(self, detail: object) -> None:
        super().__init__(f"Malformed `{CONFIG_FILE_NAME}` in default branch.\n{detail}")
        self.detail = detail


class ConfigurationFetchError(ConfigurationError):
    def __init__(self, cause: BaseException) -> None:
        super().__init__("Failed to query configuration for this repository.")
        self.cause = cause
        self.__cause__ = cause


def parse_config(text: str | bytes) -> Config:
    """Parse the contents of a configuration file."""
    try:
        if isinstance(text, bytes):
            text = text.decode("utf-8")
        return Config.from_mapping(tomllib.loads(text))
    except (UnicodeDecodeError, tomllib.TOMLDecodeError, ValueError) as exc:
        raise MalformedConfiguration(exc) from exc


class ConfigCache:
    """Caches each repository's configuration, or its failure, for a while."""

    def __init__(
        self,
        refresh_every: float = REFRESH_EVERY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._refresh_every = refresh_every
        self._clock = clock
        self._entries: dict[str, tuple[Config | ConfigurationError, float]] = {}
        self._lock = threading.Lock()

    def get(self, repo: str, fetch: Callable[[], str | bytes | None]) -> Config:
        """Return the configuration of ``repo``, calling ``fetch`` when stale.

        ``fetch`` returns the file contents, or None when the file is absent.
        """
        with self._lock:
            entry = self._entries.get(repo)
        if entry is not None and self._clock() - entry[1] < self._refresh_every:
            log.debug("returning config for %s from cache", repo)
            outcome = entry[0]
        else:
            log.debug("fetching fresh config for %s", repo)
            outcome = self._fetch_fresh(fetch)
            with self._lock:
                self._entries[repo] = (outcome, self._clock())
        if isinstance(outcome, ConfigurationError):
            raise outcome
        return outcome

    @staticmethod
    def _fetch_fresh(
        fetch: Callable[[], str | bytes | None],
    ) -> Config | ConfigurationError:
        try:
            contents = fetch()
        except Exception as exc:
            return ConfigurationFetchError(exc)
        if contents is None:
            return MissingConfiguration()
        try:
            return parse_config(contents)
        except MalformedConfiguration as exc:
            return exc