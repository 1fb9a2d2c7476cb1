"""Pre-commit tasks run by lint-staged, keyed by file glob."""

from __future__ import annotations

from atomgen.models import AnswerRecord, Language

from .paths import as_language, language_extension

BASE_LINT_STAGED: dict[str, str] = {
    "*.json": "jsonlint --quiet",
    "*.{ts,md,yml}": "prettierx --write",
}

STYLES_GLOB = "*.{css,less}"


def compose_lint_staged(answers: AnswerRecord) -> dict[str, str]:
    """Build the ``lint-staged`` map for *answers*."""
    tasks = dict(BASE_LINT_STAGED)

    if answers.has_code:
        extension = language_extension(answers.language)
        if as_language(answers.language) is Language.COFFEESCRIPT:
            tasks[f"*.{extension}"] = "coffeelint ./src"
        else:
            tasks[f"*.{extension}"] = "eslint --cache --fix"

    if answers.has_styles:
        tasks[STYLES_GLOB] = "stylelint --fix"

    return tasks
