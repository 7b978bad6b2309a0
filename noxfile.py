import nox

# Standard locations for the code
LOCATIONS = ["src", "tests"]


@nox.session(python=["3.10", "3.11", "3.12"])
def tests(session: nox.Session) -> None:
    """Run the complete test suite."""
    session.install("-e", ".[dev,redis]")
    session.run("pytest", *session.posargs)


@nox.session(python=["3.10", "3.11", "3.12"])
def autoformat(session: nox.Session) -> None:
    """Fix linting issues and format code."""
    session.install("ruff")
    session.run("ruff", "check", "--fix", *LOCATIONS)
    session.run("ruff", "format", *LOCATIONS)


@nox.session(python=["3.10", "3.11", "3.12"])
def lint(session: nox.Session) -> None:
    """Run ruff linter and formatter checks."""
    session.install("ruff")
    session.run("ruff", "check", *LOCATIONS)
    session.run("ruff", "format", "--check", *LOCATIONS)


@nox.session(python=["3.10", "3.11", "3.12"])
def type_check(session: nox.Session) -> None:
    """Run mypy static type analysis."""
    session.install("-e", ".[dev,redis]")
    session.install("mypy")
    session.run("mypy", "src")


@nox.session(python=["3.10", "3.11", "3.12"])
def arch_check(session: nox.Session) -> None:
    """Verify architectural boundaries using pytest-archon."""
    session.install("-e", ".[dev]")
    session.run("pytest", "tests/architecture", *session.posargs)


@nox.session(python=["3.10", "3.11", "3.12"])
def dead_code(session: nox.Session) -> None:
    """Scan for unused code using vulture."""
    session.install("vulture")
    session.run("vulture", "--exclude", ".nox", *LOCATIONS)
