"""Load ``.catalogrc.yaml`` and apply per-rule severities to issues."""

import dataclasses
import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .globs import matches_any
from .validators.base import Severity, ValidationIssue
from .validators.schema_validator import RULE_REQUIRED_FIELDS

log = logging.getLogger(__name__)

CONFIG_FILES = (".catalogrc.yaml", ".catalogrc.yml")

RuleSeverity = Literal["error", "warn", "off"]
RuleValue = (
    RuleSeverity | tuple[RuleSeverity] | tuple[RuleSeverity, dict[str, Any]]
)

DEFAULT_RULES: dict[str, RuleSeverity] = {
    "schema/required-fields": "error",
    "schema/valid-semver": "error",
    "schema/valid-email": "error",
    "refs/owner-exists": "error",
    "refs/valid-version-range": "error",
    "best-practices/summary-required": "error",
    "best-practices/owner-required": "error",
    "naming/service-id-format": "error",
    "naming/event-id-format": "error",
    "versions/consistent-format": "error",
    "versions/no-deprecated": "error",
}


class ConfigError(Exception):
    """Raised when a config file is invalid."""


class RuleConfig(BaseModel):
    """A rule's severity and options."""

    severity: RuleSeverity
    options: dict[str, Any] = Field(default_factory=dict)


class ConfigOverride(BaseModel):
    """Rule settings applied to files matching some patterns."""

    files: list[str]
    rules: dict[str, RuleValue] = Field(default_factory=dict)


class LinterConfig(BaseModel):
    """Linter settings loaded from the catalog root."""

    model_config = ConfigDict(populate_by_name=True)

    rules: dict[str, RuleValue] = Field(default_factory=lambda: dict(DEFAULT_RULES))
    ignore_patterns: list[str] = Field(default_factory=list, alias="ignorePatterns")
    overrides: list[ConfigOverride] = Field(default_factory=list)


def _read_config(path: Path) -> LinterConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path.name}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {path.name}: {e}") from e

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"{path.name} must be a YAML mapping, got {type(raw).__name__}")

    rules = raw.get("rules") or {}
    if not isinstance(rules, dict):
        raise ConfigError(f"'rules' in {path.name} must be a mapping")

    try:
        return LinterConfig.model_validate(
            {**raw, "rules": {**DEFAULT_RULES, **rules}}
        )
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path.name}: {e}") from e


def load_config(root: str | Path) -> LinterConfig:
    """Load the linter config from a catalog root.

    User rules are merged over DEFAULT_RULES. A missing config file gives
    the defaults; a broken one is logged and also gives the defaults.
    """
    root = Path(root)
    for name in CONFIG_FILES:
        path = root / name
        if not path.exists():
            continue
        try:
            config = _read_config(path)
        except ConfigError as e:
            log.warning("Could not load %s: %s", name, e)
            return LinterConfig()
        log.debug("Loaded config from %s", path)
        return config

    return LinterConfig()


def parse_rule_config(rule: RuleValue | list) -> RuleConfig:
    """Normalise ``"warn"``, ``["warn"]`` or ``["error", {...}]`` into a RuleConfig."""
    if isinstance(rule, (list, tuple)):
        severity = rule[0]
        options = rule[1] if len(rule) > 1 else {}
        return RuleConfig(severity=severity, options=options)
    return RuleConfig(severity=rule)


def get_effective_rules(path: str, config: LinterConfig) -> dict[str, RuleConfig]:
    """Resolve the rules that apply to one file, overrides included."""
    effective: dict[str, Any] = {**DEFAULT_RULES, **config.rules}

    for override in config.overrides:
        if matches_any(path, override.files):
            effective.update(override.rules)

    return {name: parse_rule_config(value) for name, value in effective.items()}


def rule_name_for(issue: ValidationIssue, rules: dict[str, RuleConfig]) -> str:
    """Name the configurable rule governing an issue.

    Issues whose own rule is not configurable, such as missing services or
    domains, fall under ``schema/required-fields``.
    """
    if issue.rule_id and issue.rule_id in rules:
        return issue.rule_id
    return RULE_REQUIRED_FIELDS


def apply_rule_severity(
    issues: list[ValidationIssue], rules: dict[str, RuleConfig]
) -> list[ValidationIssue]:
    """Drop issues whose rule is off and set severity from the rule."""
    result: list[ValidationIssue] = []

    for issue in issues:
        rule = rules.get(rule_name_for(issue, rules))
        if rule is None or rule.severity == "off":
            continue
        severity = Severity.WARNING if rule.severity == "warn" else Severity.ERROR
        result.append(dataclasses.replace(issue, severity=severity))

    return result
