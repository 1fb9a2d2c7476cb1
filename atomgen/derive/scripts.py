"""Shell commands for the generated package's ``scripts`` section."""

from __future__ import annotations

from atomgen.models import AnswerRecord, Bundler, Language

from .errors import UnsupportedBundlerError
from .paths import as_language, language_extension

NOTHING_TO_BUILD = 'echo "Nothing to build"'
NOTHING_TO_WATCH = 'echo "Nothing to watch"'
NOTHING_TO_LINT = 'echo "Nothing to lint"'
NOTHING_TO_TEST = 'echo "Nothing to test"'
NOTHING_TO_ANALYZE = 'echo "Nothing to analyze"'

LINT_ALL_SCRIPT = "npm-run-all --parallel lint:*"

_BUILD_COMMANDS: dict[Bundler, str] = {
    Bundler.WEBPACK: "webpack --mode production",
    Bundler.ROLLUP: "rollup --config",
}

_WATCH_COMMANDS: dict[Bundler, str] = {
    Bundler.WEBPACK: "webpack --watch --mode none",
    Bundler.ROLLUP: "rollup --watch --config",
}


def as_bundler(bundler: str | None) -> Bundler:
    """Coerce a bundler name to ``Bundler`` or raise ``UnsupportedBundlerError``."""
    try:
        return Bundler(bundler)
    except ValueError:
        raise UnsupportedBundlerError(bundler) from None


def build_script(answers: AnswerRecord) -> str:
    """Production build command for the selected bundler."""
    if not answers.has_code:
        return NOTHING_TO_BUILD
    return _BUILD_COMMANDS[as_bundler(answers.bundler)]


def watch_script(answers: AnswerRecord) -> str:
    """Watch-mode command for the selected bundler."""
    if not answers.has_code:
        return NOTHING_TO_WATCH
    return _WATCH_COMMANDS[as_bundler(answers.bundler)]


def analyze_script(answers: AnswerRecord) -> str:
    if not answers.has_code:
        return NOTHING_TO_ANALYZE
    return "source-map-explorer lib/**/*.js"


def lint_code_script(answers: AnswerRecord) -> str:
    """Linter invocation for the package sources.

    Unmatched globs are not an error so an empty ``src/`` still lints cleanly.
    """
    if not answers.has_code:
        return NOTHING_TO_LINT
    if as_language(answers.language) is Language.COFFEESCRIPT:
        return "coffeelint ./src"
    extension = language_extension(answers.language)
    return (
        "eslint --ignore-path .gitignore --no-error-on-unmatched-pattern "
        f"./src/**/*.{extension}"
    )


def lint_styles_script(answers: AnswerRecord) -> str:
    if not answers.has_styles:
        return NOTHING_TO_LINT
    return "stylelint --allow-empty-input styles/*.{css,less}"


def unit_test_script(answers: AnswerRecord) -> str:
    """Placeholder test command; fails until the author writes tests."""
    if not answers.has_code:
        return NOTHING_TO_TEST
    return "echo 'Error: no test specified' && exit 1"
