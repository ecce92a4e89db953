"""Config file loading, environment fallback and JQL construction."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from board_core.layout import Breakpoints

DEFAULT_JQL = (
    "developer = currentUser() AND status NOT IN "
    "('Done', 'Shipped', 'Discontinued', 'Closed', 'Hibernate')"
)
DEFAULT_REFRESH_SECONDS = 60
SOURCES = ("api", "acli")


class ConfigError(ValueError):
    pass


@dataclass
class JiraSettings:
    url: str | None = None
    email: str | None = None
    api_token: str | None = None


@dataclass
class Config:
    jira: JiraSettings = field(default_factory=JiraSettings)
    jql: str = DEFAULT_JQL
    source: str = "api"
    refresh_seconds: int = DEFAULT_REFRESH_SECONDS
    breakpoints: Breakpoints = field(default_factory=Breakpoints)


def default_config_path(env: dict[str, str] | None = None) -> Path:
    override = (os.environ if env is None else env).get("KANBARS_CONFIG")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "kanbars" / "config.json"


def site_url(site: str) -> str:
    if site.startswith(("http://", "https://")):
        return site
    return f"https://{site}"


def load_user_config(path: Path, required: bool) -> dict:
    if not path.exists():
        if required:
            raise ConfigError(f"config path not found: {path}")
        return {}

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON config: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigError(f"config must be a JSON object: {path}")
    return data


def _section(data: dict, name: str) -> dict[str, Any]:
    value = data.get(name)
    return value if isinstance(value, dict) else {}


def _env_settings(env: dict[str, str]) -> JiraSettings:
    url = env.get("JIRA_URL")
    if not url and env.get("JIRA_SITE"):
        url = site_url(env["JIRA_SITE"])
    return JiraSettings(
        url=url or None,
        email=env.get("JIRA_USER") or env.get("JIRA_EMAIL") or None,
        api_token=env.get("JIRA_API_TOKEN") or None,
    )


def load_config(path: str | Path | None = None, env: dict[str, str] | None = None) -> Config:
    """Load the JSON config; credentials missing from the file come from the environment."""
    if env is None:
        env = dict(os.environ)

    config_path = Path(path).expanduser() if path else default_config_path(env)
    user_config = load_user_config(config_path, required=path is not None)

    jira = _section(user_config, "jira")
    from_env = _env_settings(env)
    settings = JiraSettings(
        url=jira.get("url") or from_env.url,
        email=jira.get("email") or from_env.email,
        api_token=jira.get("api_token") or from_env.api_token,
    )

    config = Config(jira=settings)

    query = _section(user_config, "query")
    if isinstance(query.get("jql"), str) and query["jql"].strip():
        config.jql = query["jql"].strip()

    source = user_config.get("source")
    if source is not None:
        if source not in SOURCES:
            raise ConfigError(f"unknown source in config: {source}")
        config.source = source

    if "refresh_seconds" in user_config:
        try:
            config.refresh_seconds = max(1, int(user_config["refresh_seconds"]))
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid refresh_seconds: {user_config['refresh_seconds']!r}") from exc

    layout = _section(user_config, "layout")
    if layout:
        try:
            breakpoints = Breakpoints(
                two_column=int(layout.get("two_column", config.breakpoints.two_column)),
                four_column=int(layout.get("four_column", config.breakpoints.four_column)),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"invalid layout breakpoints: {exc}") from exc
        if not 0 < breakpoints.two_column <= breakpoints.four_column:
            raise ConfigError("layout breakpoints must satisfy 0 < two_column <= four_column")
        config.breakpoints = breakpoints

    return config


def build_jql(
    default_jql: str,
    jql: str | None = None,
    epic: str | None = None,
    assignee: str | None = None,
) -> str:
    if jql:
        return jql

    result = default_jql
    if epic:
        result = f'"Epic Link" = {epic} AND {result}'

    if assignee:
        if "assignee" in result:
            result = result.replace("assignee = currentUser()", f"assignee = '{assignee}'")
        else:
            result = f"assignee = '{assignee}' AND {result}"

    return result


def sample_config() -> dict:
    return {
        "jira": {"url": None, "email": None, "api_token": None},
        "query": {"jql": DEFAULT_JQL},
        "source": "api",
        "refresh_seconds": DEFAULT_REFRESH_SECONDS,
        "layout": {
            "two_column": Breakpoints().two_column,
            "four_column": Breakpoints().four_column,
        },
    }


def write_sample_config(path: Path) -> Path:
    if path.exists():
        raise ConfigError(f"config already exists: {path}")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(sample_config(), indent=2) + "\n")
    return path
