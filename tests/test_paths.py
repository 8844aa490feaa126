"""
Tests for resolving file references against the document root.
"""

import os
from pathlib import Path

from loginsrv_config.config.loader import ConfigLoader, load_string
from loginsrv_config.config.paths import resolve_paths
from loginsrv_config.config.schema import LoginConfig


def test_relative_files(tmp_path: Path) -> None:
    """Template joins the document root, the host file stays as typed."""
    config = load_string(
        """loginsrv {
            template myTemplate.tpl
            redirect_host_file redirectDomains.txt
            simple bob=secret
        }""",
        document_root=tmp_path,
    )

    assert config.template == os.path.join(str(tmp_path), "myTemplate.tpl")
    assert config.redirect_host_file == "redirectDomains.txt"


def test_absolute_template_unchanged(tmp_path: Path) -> None:
    absolute = os.path.join(os.path.sep, "etc", "login.tpl")
    configs = ConfigLoader(tmp_path).load_string(
        f"login {{\n template {absolute}\n simple bob=secret\n}}"
    )

    assert configs[0].template == absolute


def test_without_document_root() -> None:
    config = LoginConfig(jwt_secret="s", template="login.tpl", redirect_host_file="hosts.txt")

    assert resolve_paths(config, "") is config


def test_resolve_returns_copy(tmp_path: Path) -> None:
    config = LoginConfig(
        jwt_secret="s",
        template="sub/../login.tpl",
        backends={"simple": {"bob": "secret"}},
    )

    resolved = resolve_paths(config, str(tmp_path))

    assert resolved.template == os.path.join(str(tmp_path), "login.tpl")
    assert resolved.backends == config.backends
    assert config.template == "sub/../login.tpl"


def test_empty_template_not_resolved(tmp_path: Path) -> None:
    config = LoginConfig(jwt_secret="s")

    assert resolve_paths(config, str(tmp_path)).template == ""
