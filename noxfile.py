"""Nox automation sessions for book_pager."""

from __future__ import annotations

from pathlib import Path

import nox

nox.options.sessions = ("lint", "typecheck", "tests")
nox.options.reuse_existing_virtualenvs = True

PROJECT_ROOT = Path(__file__).parent


def _install_project(session: nox.Session, *extras: str) -> None:
    target = f"{PROJECT_ROOT}[{','.join(extras)}]" if extras else str(PROJECT_ROOT)
    session.install("-e", target)


@nox.session()
def lint(session: nox.Session) -> None:
    session.install("black", "flake8")
    session.run("black", "--check", "book_pager", "tests")
    session.run("flake8", "--max-line-length", "100", "book_pager", "tests")


@nox.session()
def typecheck(session: nox.Session) -> None:
    session.install("mypy", "types-PyYAML")
    _install_project(session)
    session.run("mypy", "book_pager")


@nox.session()
def tests(session: nox.Session) -> None:
    _install_project(session, "test")
    session.run("pytest", "tests")
