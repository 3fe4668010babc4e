"""Build targets and their output file extensions."""

import platform
from enum import Enum
from typing import Optional


class BuildTarget(Enum):
    """Supported build targets."""
    StandaloneOSX = "StandaloneOSX"
    StandaloneWindows = "StandaloneWindows"
    StandaloneWindows64 = "StandaloneWindows64"
    iOS = "iOS"
    Android = "Android"
    StandaloneLinux = "StandaloneLinux"
    StandaloneLinux64 = "StandaloneLinux64"
    StandaloneLinuxUniversal = "StandaloneLinuxUniversal"
    WebGL = "WebGL"
    WSAPlayer = "WSAPlayer"
    Tizen = "Tizen"
    PSP2 = "PSP2"
    PS4 = "PS4"
    PSM = "PSM"
    XboxOne = "XboxOne"
    N3DS = "N3DS"
    WiiU = "WiiU"
    tvOS = "tvOS"
    Switch = "Switch"
    NoTarget = "NoTarget"


UNKNOWN_EXTENSION = ".unknown"

EXTENSIONS = {
    BuildTarget.StandaloneOSX: ".app",
    BuildTarget.StandaloneWindows: ".exe",
    BuildTarget.StandaloneWindows64: ".exe",
    BuildTarget.iOS: "",  # Xcode project folder
    BuildTarget.Android: ".apk",
}

NATIVE_TARGETS = {
    "Windows": BuildTarget.StandaloneWindows64,
    "Darwin": BuildTarget.StandaloneOSX,
    "Linux": BuildTarget.StandaloneLinux64,
}


def get_extension(build_target: Optional[BuildTarget]) -> str:
    """Return the output file extension for a build target.

    Targets without a dedicated entry get ``UNKNOWN_EXTENSION``.
    """
    return EXTENSIONS.get(build_target, UNKNOWN_EXTENSION)


def parse_build_target(name: str) -> Optional[BuildTarget]:
    """Look up a build target by its exact (case-sensitive) name."""
    try:
        return BuildTarget[name]
    except KeyError:
        return None


def native_build_target(system: Optional[str] = None) -> BuildTarget:
    """Return the desktop build target matching the running OS."""
    if system is None:
        system = platform.system()
    return NATIVE_TARGETS.get(system, BuildTarget.NoTarget)
