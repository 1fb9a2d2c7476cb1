"""npm dependency lists for the generated package.

The resolver only names packages; installing them is the process runner's
job.  Both lists come back de-duplicated and sorted by code point.
"""

from __future__ import annotations

from atomgen.models import AnswerRecord, Bundler, Language


# ---------------------------------------------------------------------------
# Package sets
# ---------------------------------------------------------------------------

BASELINE_DEV_DEPENDENCIES: tuple[str, ...] = (
    "husky",
    "lint-staged",
    "jsonlint",
    "npm-run-all",
    "prettierx",
    "source-map-explorer",
    "stylelint",
)

WEBPACK_DEV_DEPENDENCIES: tuple[str, ...] = (
    "sass-loader",
    "style-loader",
    "css-loader",
    "webpack-cli",
    "webpack",
)

ROLLUP_DEV_DEPENDENCIES: tuple[str, ...] = (
    "rollup",
    "@rollup/plugin-babel",
    "@rollup/plugin-commonjs",
    "@rollup/plugin-json",
    "@rollup/plugin-node-resolve",
    "rollup-plugin-scss",
    "rollup-plugin-terser",
)

# Extra bundler plugins/loaders keyed by (bundler, language).
BUNDLER_LANGUAGE_DEV_DEPENDENCIES: dict[tuple[Bundler, Language], tuple[str, ...]] = {
    (Bundler.WEBPACK, Language.COFFEESCRIPT): ("coffee-loader",),
    (Bundler.WEBPACK, Language.JAVASCRIPT): ("babel-loader",),
    (Bundler.WEBPACK, Language.TYPESCRIPT): ("ts-loader",),
    (Bundler.ROLLUP, Language.COFFEESCRIPT): ("rollup-plugin-coffee-script",),
    (Bundler.ROLLUP, Language.TYPESCRIPT): ("@rollup/plugin-typescript",),
}

COFFEESCRIPT_DEV_DEPENDENCIES: tuple[str, ...] = (
    "coffeelint@2",
    "coffeescript@2",
)

JAVASCRIPT_DEV_DEPENDENCIES: tuple[str, ...] = (
    "@babel/core",
    "@babel/eslint-parser",
    "@babel/plugin-proposal-export-namespace-from",
    "@babel/preset-env",
    "core-js@3",
    "eslint-plugin-json",
    "eslint-plugin-node",
    "eslint",
)

TYPESCRIPT_DEV_DEPENDENCIES: tuple[str, ...] = (
    "@babel/core",
    "@babel/eslint-parser",
    "@babel/plugin-proposal-export-namespace-from",
    "@babel/preset-env",
    "@types/atom",
    "@types/node",
    "@typescript-eslint/eslint-plugin",
    "@typescript-eslint/parser",
    "core-js@3",
    "eslint",
    "eslint-plugin-json",
    "tslib",
    "typescript",
)

_BUNDLER_DEV_DEPENDENCIES: dict[str, tuple[str, ...]] = {
    Bundler.WEBPACK.value: WEBPACK_DEV_DEPENDENCIES,
    Bundler.ROLLUP.value: ROLLUP_DEV_DEPENDENCIES,
}

_LANGUAGE_DEV_DEPENDENCIES: dict[str, tuple[str, ...]] = {
    Language.COFFEESCRIPT.value: COFFEESCRIPT_DEV_DEPENDENCIES,
    Language.JAVASCRIPT.value: JAVASCRIPT_DEV_DEPENDENCIES,
    Language.TYPESCRIPT.value: TYPESCRIPT_DEV_DEPENDENCIES,
}


# ---------------------------------------------------------------------------
# Resolver
# ---------------------------------------------------------------------------


def resolve_dependencies(answers: AnswerRecord) -> tuple[list[str], list[str]]:
    """Compute ``(dependencies, dev_dependencies)`` for *answers*.

    Bundler and language packages are only added when the ``code`` feature is
    selected.  Bundler or language strings that match no known value add
    nothing; the script and path composers are the ones that reject them.
    """
    dependencies: list[str] = []
    dev_dependencies: list[str] = list(BASELINE_DEV_DEPENDENCIES)

    if answers.has_code:
        dev_dependencies.extend(_code_dev_dependencies(answers))

    if answers.has_styles:
        dev_dependencies.extend(["stylelint", f"stylelint-config-{answers.stylelint_config}"])

    dev_dependencies.extend(answers.additional_dependencies)

    return _unique_sorted(dependencies), _unique_sorted(dev_dependencies)


def _code_dev_dependencies(answers: AnswerRecord) -> list[str]:
    """Bundler, loader and language tooling for the ``code`` feature."""
    bundler = answers.bundler or ""
    language = answers.language or ""
    packages: list[str] = []

    packages.extend(_BUNDLER_DEV_DEPENDENCIES.get(bundler, ()))
    packages.extend(_LANGUAGE_DEV_DEPENDENCIES.get(language, ()))

    for (known_bundler, known_language), extra in BUNDLER_LANGUAGE_DEV_DEPENDENCIES.items():
        if bundler == known_bundler.value and language == known_language.value:
            packages.extend(extra)

    if language in (Language.JAVASCRIPT.value, Language.TYPESCRIPT.value):
        packages.append(f"eslint-config-{answers.eslint_config}")

    if language == Language.JAVASCRIPT.value:
        packages.extend(answers.babel_presets)

    return packages


def _unique_sorted(packages: list[str]) -> list[str]:
    return sorted(set(packages))
