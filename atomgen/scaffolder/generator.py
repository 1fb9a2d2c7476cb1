"""Main scaffolding orchestrator.

Takes a validated ``AnswerRecord``, derives the configuration documents with
``atomgen.derive`` and renders the Atom package file tree.  Installing
dependencies and the optional git/apm/editor steps are delegated to
``ProcessRunner``.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from atomgen.config import GeneratorConfig
from atomgen.derive import (
    derive_bundle,
    derive_fields,
    destination_path,
    language_extension,
    template_lookup_path,
)
from atomgen.derive.paths import as_language
from atomgen.derive.scripts import as_bundler
from atomgen.licenses import LicenseRegistry
from atomgen.models import (
    DEVELOPER_CONSOLE_PACKAGE,
    METRICS_PACKAGE,
    AnswerRecord,
    Bundler,
    CIProvider,
    DerivedConfigBundle,
    DerivedFields,
    Feature,
    Language,
    PackageManager,
)
from atomgen.utils import console

from .process import ProcessRunner
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# Static file tables
# ---------------------------------------------------------------------------

# Files every package gets: template -> output path
BASE_FILES: dict[str, str] = {
    "shared/package.json.j2": "package.json",
    "shared/README.md.j2": "README.md",
    "shared/LICENSE.j2": "LICENSE",
    "shared/_editorconfig.j2": ".editorconfig",
    "shared/_gitignore.j2": ".gitignore",
    "shared/_gitattributes.j2": ".gitattributes",
    "shared/_husky.j2": ".husky/pre-commit",
}

CI_FILES: dict[CIProvider, tuple[str, str]] = {
    CIProvider.BITBUCKET_PIPELINES: ("shared/ci/bitbucket-pipelines.yml.j2", "bitbucket-pipelines.yml"),
    CIProvider.CIRCLE_CI: ("shared/ci/circleci.yml.j2", ".circleci/config.yml"),
    CIProvider.GITHUB_ACTIONS: ("shared/ci/github-actions.yml.j2", ".github/workflows/nodejs.yml"),
    CIProvider.TRAVIS_CI: ("shared/ci/travis.yml.j2", ".travis.yml"),
}

SOURCE_TEMPLATES: tuple[str, ...] = (
    "src/main.j2",
    "src/config.j2",
    "src/hello-world.j2",
)

# Output paths that must be executable after rendering
EXECUTABLE_FILES: frozenset[str] = frozenset({".husky/pre-commit"})


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class PackageGenerator:
    """Scaffolds one Atom package.

    Given an ``AnswerRecord``, writes a directory containing:
    - ``package.json`` with scripts, activation settings and lint-staged rules
    - README, LICENSE, editor/git/husky/formatter config
    - keymaps, menus and styles for the selected features
    - sources, bundler config and linter config for the ``code`` feature
    - CI configuration for the selected providers
    """

    def __init__(
        self,
        answers: AnswerRecord,
        config: GeneratorConfig | None = None,
        licenses: LicenseRegistry | None = None,
        runner: ProcessRunner | None = None,
    ) -> None:
        self.answers = answers
        self.config = config or GeneratorConfig()
        self.licenses = licenses or LicenseRegistry()
        self.renderer = TemplateRenderer(
            self.config.template_dir, indentation=self.config.indentation
        )
        self.project_root = self.config.project_path(answers.name)
        self.runner = runner or ProcessRunner(
            self.project_root,
            timeout=self.config.command_timeout,
            verbose=self.config.debug,
        )
        self.fields: DerivedFields = derive_fields(answers, self.licenses)
        self.bundle: DerivedConfigBundle = derive_bundle(answers)

    # -- Public API --------------------------------------------------------

    async def run(self) -> Path:
        """Write the package, install dependencies and run the optional steps."""
        root = await self.generate()
        if self.config.install:
            await self.install()
        await self.finalize()
        return root

    async def generate(self) -> Path:
        """Render the complete package file tree.

        Returns:
            Path to the generated package root.
        """
        root = self.project_root
        await asyncio.to_thread(root.mkdir, parents=True, exist_ok=True)

        context = self.build_context()
        await self._create_directories(root)

        for template_path, output_name in self.file_plan():
            path = await self.renderer.render_to_file(
                template_path, root / output_name, context
            )
            if output_name in EXECUTABLE_FILES:
                await asyncio.to_thread(_make_executable, path)
            if self.config.debug:
                console.print(f"  [dim]wrote {path}[/dim]")

        return root

    async def install(self) -> None:
        """Install the resolved dependency lists with the chosen package manager."""
        dependencies = self.bundle.dependencies if self.answers.has_code else []
        await self.runner.install(
            self.answers.package_manager,
            dependencies,
            self.bundle.dev_dependencies,
        )

    async def finalize(self) -> None:
        """Run ``git init``, ``apm link --dev`` and the editor as requested."""
        if self.answers.init_git:
            await self.runner.init_git()
        if self.answers.link_dev_package:
            await self.runner.link_dev_package()
        if self.answers.open_in_editor:
            await self.runner.open_in_editor()

    # -- Context building --------------------------------------------------

    def build_context(self) -> dict[str, Any]:
        """Build the Jinja2 template context."""
        answers = self.answers
        language = as_language(answers.language).value if answers.has_code else ""
        return {
            "pkg": {
                **answers.model_dump(mode="json"),
                **self.fields.model_dump(mode="json"),
            },
            "language": language,
            "extension": language_extension(language) if language else "",
            "manifest": self.bundle.manifest,
            "babel": self.bundle.babel_config,
            "formatter": self.bundle.formatter_options,
            "indentation": self.config.indentation,
            "has_code": answers.has_code,
            "has_styles": answers.has_styles,
            "has_metrics": answers.has_code and METRICS_PACKAGE in answers.additional_dependencies,
            "has_developer_console": (
                answers.has_code and DEVELOPER_CONSOLE_PACKAGE in answers.additional_dependencies
            ),
            "foreign_lockfile": (
                "package-lock.json"
                if answers.package_manager is PackageManager.YARN
                else "yarn.lock"
            ),
        }

    # -- File plan ---------------------------------------------------------

    def file_plan(self) -> list[tuple[str, str]]:
        """Return ``(template_path, output_path)`` pairs to render, in order.

        Raises:
            TemplateNotFoundError: If a source template is missing for the
                selected language and in ``shared/``.
        """
        answers = self.answers
        name = answers.name
        plan: list[tuple[str, str]] = list(BASE_FILES.items())

        if self.bundle.formatter_options is not None:
            plan.append(("shared/_prettierrc.j2", ".prettierrc"))

        if answers.has_code:
            plan.extend(self._code_files())

        if answers.has_styles:
            plan.append(("shared/styles/style.less.j2", f"styles/{name}.less"))
            plan.append(("shared/_stylelintrc.j2", ".stylelintrc"))

        for provider in answers.add_config:
            plan.append(CI_FILES[provider])

        if answers.vscode_tasks:
            plan.append(("shared/vscode/tasks.json.j2", ".vscode/tasks.json"))

        return plan

    def _code_files(self) -> list[tuple[str, str]]:
        """Sources, keymaps, menus and tooling config for the ``code`` feature."""
        answers = self.answers
        name = answers.name
        language = as_language(answers.language)
        bundler = as_bundler(answers.bundler)
        exists = self.renderer.has_template
        files: list[tuple[str, str]] = []

        for key in SOURCE_TEMPLATES:
            files.append((
                template_lookup_path(key, language.value, exists),
                destination_path(key, language.value),
            ))

        bundler_config = f"{bundler.value}.config.js"
        files.append((template_lookup_path(f"{bundler_config}.j2", language.value, exists), bundler_config))

        # CoffeeScript packages keep CSON keymaps and menus.
        settings_ext = "cson" if language is Language.COFFEESCRIPT else "json"
        settings_dir = "coffeescript" if language is Language.COFFEESCRIPT else "shared"
        if Feature.KEYMAPS in answers.features:
            files.append((f"{settings_dir}/keymaps/keymap.{settings_ext}.j2", f"keymaps/{name}.{settings_ext}"))
        if Feature.MENUS in answers.features:
            files.append((f"{settings_dir}/menus/menu.{settings_ext}.j2", f"menus/{name}.{settings_ext}"))

        if language is Language.COFFEESCRIPT:
            files.append(("coffeescript/_coffeelintignore.j2", ".coffeelintignore"))
            files.append(("coffeescript/coffeelint.json.j2", "coffeelint.json"))
        else:
            files.append((f"{language.value}/_eslintrc.j2", ".eslintrc.cjs"))
            if language is Language.TYPESCRIPT and bundler is Bundler.WEBPACK:
                files.append(("typescript/tsconfig.json.j2", "tsconfig.json"))

        if self.bundle.babel_config is not None:
            files.append((template_lookup_path("_babelrc.j2", language.value, exists), ".babelrc"))

        return files

    # -- Directory structure -----------------------------------------------

    async def _create_directories(self, root: Path) -> None:
        """Create ``src/`` and one directory per non-code feature."""
        dirs = ["src"]
        dirs.extend(
            feature.value for feature in self.answers.features if feature is not Feature.CODE
        )

        async def _mkdir(d: str) -> None:
            p = root / d
            p.mkdir(parents=True, exist_ok=True)

        await asyncio.gather(*[_mkdir(d) for d in dirs])


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_executable(path: Path) -> None:
    """Add the executable bits to *path* (git hooks)."""
    import stat

    current = path.stat().st_mode
    path.chmod(current | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
