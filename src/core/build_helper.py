"""Resolve build target and output path from build script arguments.

Arguments are scanned positionally: ``-<name> <value>`` pairs, first
occurrence wins. Example::

    helper = BuildHelper(["-buildTarget", "Android", "-output", "dist"],
                         product_name="MyGame")
    helper.get_output_path()  # 'dist/MyGame.apk'
"""

import os
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .logger import setup_logger
from .platforms import BuildTarget, get_extension, parse_build_target

logger = setup_logger("BuildHelper")

DEFAULT_OUTPUT_DIRECTORY = "Builds"

BUILD_TARGET_ARG = "buildTarget"
OUTPUT_ARG = "output"
NAME_ARG = "name"


class MissingArgumentValueError(ValueError):
    """A flag was passed as the last token, without a value."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Missing value for argument '-{name}'")


@dataclass(frozen=True)
class BuildSettings:
    """Resolved build configuration handed back to the build process."""
    build_target: BuildTarget
    output_path: str

    @property
    def output_directory(self) -> str:
        return os.path.dirname(self.output_path)

    @property
    def output_filename(self) -> str:
        return os.path.basename(self.output_path)

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "build_target": self.build_target.name,
            "output_path": self.output_path,
            "output_directory": self.output_directory,
            "output_filename": self.output_filename,
        }


def has_extension(path: str) -> bool:
    """True when the last path component has a ``.`` followed by something.

    Dotfiles count: ``.cache`` has an extension, ``foo.`` has none.
    """
    filename = os.path.basename(path)
    dot = filename.rfind(".")
    return dot != -1 and dot < len(filename) - 1


def host_arguments(argv: Sequence[str]) -> List[str]:
    """Strip the program name, or everything up to ``--`` when present."""
    argv = list(argv)
    if "--" in argv:
        return argv[argv.index("--") + 1:]
    return argv[1:]


class BuildHelper:
    """Derives build settings from the arguments passed to a build script."""

    def __init__(self, args: Sequence[str], product_name: str = "Product",
                 active_build_target: BuildTarget = BuildTarget.NoTarget):
        self.args: Tuple[str, ...] = tuple(args)
        self.product_name = product_name
        self.active_build_target = active_build_target

    def try_get_argument(self, name: str) -> Tuple[bool, Optional[str]]:
        """Return ``(found, value)`` for the first ``-<name>`` flag.

        Raises:
            MissingArgumentValueError: the flag is the last token.
        """
        flag = "-" + name
        for i, arg in enumerate(self.args):
            if arg == flag:
                if i + 1 >= len(self.args):
                    raise MissingArgumentValueError(name)
                return True, self.args[i + 1]
        return False, None

    def get_argument(self, name: str, default: Optional[str] = None) -> Optional[str]:
        found, value = self.try_get_argument(name)
        return value if found else default

    def has_argument(self, name: str) -> bool:
        """True when ``-<name>`` is present with a value."""
        return self.try_get_argument(name)[0]

    def get_build_target(self, default: Optional[BuildTarget] = None) -> BuildTarget:
        """Build target from ``-buildTarget``, else the default.

        ``default`` falls back to the helper's active build target.
        """
        if default is None:
            default = self.active_build_target

        found, name = self.try_get_argument(BUILD_TARGET_ARG)
        if not found:
            return default

        build_target = parse_build_target(name)
        if build_target is None:
            logger.warning(
                f"Build target \"{name}\" not defined on {BuildTarget.__name__}, "
                f"using {default.name} to build"
            )
            return default

        logger.info(f"Received custom build target {name}")
        return build_target

    def get_extension(self, build_target: BuildTarget) -> str:
        return get_extension(build_target)

    def get_output_path(self, build_target: Optional[BuildTarget] = None,
                        product_name: Optional[str] = None) -> str:
        """Output file path for a build target.

        ``-output`` with an extension is a full file path, without one it
        is a directory. ``-name`` then overrides the filename, getting the
        target extension appended unless it has its own.
        """
        if build_target is None:
            build_target = self.get_build_target()
        if product_name is None:
            product_name = self.product_name

        extension = self.get_extension(build_target)

        output_directory = DEFAULT_OUTPUT_DIRECTORY
        output_filename = product_name + extension

        found, output = self.try_get_argument(OUTPUT_ARG)
        if found:
            if has_extension(output):
                output_directory, output_filename = os.path.split(output)
            else:
                output_directory = output

        found, name = self.try_get_argument(NAME_ARG)
        if found:
            output_filename = name if has_extension(name) else name + extension

        output_path = os.path.join(output_directory, output_filename)
        logger.debug(f"Output path for {build_target.name}: {output_path}")
        return output_path

    def resolve(self) -> BuildSettings:
        """Resolve the build target and the output path for it."""
        build_target = self.get_build_target()
        return BuildSettings(build_target, self.get_output_path(build_target))
