"""atomgen scaffolder -- writes an Atom package to disk.

This module takes a validated ``AnswerRecord`` and renders the package
directory: manifest, sources, bundler and linter config, CI files.  It then
installs the resolved dependencies and runs the optional git/apm/editor steps.

Quick usage::

    from atomgen.models import AnswerRecord
    from atomgen.scaffolder import PackageGenerator

    answers = AnswerRecord(
        name="my-package",
        description="A sample package",
        language="javascript",
        bundler="rollup",
        eslint_config="airbnb",
    )
    generator = PackageGenerator(answers)
    package_path = await generator.run()
"""

from atomgen.scaffolder.generator import PackageGenerator
from atomgen.scaffolder.process import ProcessRunner, ProcessRunnerError
from atomgen.scaffolder.templates import TemplateRenderer

__all__ = [
    "PackageGenerator",
    "ProcessRunner",
    "ProcessRunnerError",
    "TemplateRenderer",
]
