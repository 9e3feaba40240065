"""macOS language sources read through the ``defaults`` command.

``defaults read`` prints old-style property lists, in which keys and values
containing spaces or punctuation are quoted and plain words are not::

    (
            {
            InputSourceKind = "Keyboard Layout";
            "KeyboardLayout ID" = 0;
            "KeyboardLayout Name" = "U.S.";
        },
            {
            "Bundle ID" = "com.apple.inputmethod.Korean";
            "Input Mode" = "com.apple.inputmethod.Korean.2SetKorean";
            InputSourceKind = "Input Mode";
        }
    )
"""

from __future__ import annotations

import re
from typing import List, Optional

from keyloc.capabilities import map_input_source, normalize_language_code

from .protocol import RawIdentifier
from .registry import register_backend
from .runner import CommandRunner

INPUT_SOURCE_FIELD = re.compile(
    r'"?(?:KeyboardLayout Name|Bundle ID|Input Mode)"?\s*=\s*"?([^";\n]+?)"?\s*;'
)
# One entry of a top-level list: "en-US", or a bare ko
LANGUAGE_LIST_ENTRY = re.compile(r'^\s*"?([A-Za-z]{2,3}(?:[-_][A-Za-z0-9]+)*)"?\s*,?\s*$', re.MULTILINE)
VOICE_LANGUAGES_BLOCK = re.compile(r"Languages\s*=\s*\(([^)]*)\)\s*;")
LANGUAGE_TAG = re.compile(r'"?([A-Za-z]{2,3}(?:[-_][A-Za-z0-9]+)*)"?')


class InputSourcesReader:
    """Enabled keyboard layouts and input methods."""

    name = "input_sources"
    command = ["defaults", "read", "com.apple.HIToolbox", "AppleEnabledInputSources"]

    def __init__(self, runner: CommandRunner) -> None:
        self._run = runner

    def read(self) -> List[RawIdentifier]:
        output = self._run(self.command)
        return [m.group(1).strip() for m in INPUT_SOURCE_FIELD.finditer(output)]

    def resolve(self, identifier: RawIdentifier) -> Optional[str]:
        return map_input_source(str(identifier))


class PreferredLanguagesReader:
    """The user's ordered list of preferred system languages."""

    name = "preferred_languages"
    command = ["defaults", "read", "-g", "AppleLanguages"]

    def __init__(self, runner: CommandRunner) -> None:
        self._run = runner

    def read(self) -> List[RawIdentifier]:
        output = self._run(self.command)
        return [m.group(1) for m in LANGUAGE_LIST_ENTRY.finditer(output)]

    def resolve(self, identifier: RawIdentifier) -> Optional[str]:
        return normalize_language_code(str(identifier))


class VoiceLanguagesReader:
    """Languages of the installed speech voices."""

    name = "voice_languages"
    command = ["defaults", "read", "com.apple.voiceservices"]

    def __init__(self, runner: CommandRunner) -> None:
        self._run = runner

    def read(self) -> List[RawIdentifier]:
        output = self._run(self.command)
        tags: List[RawIdentifier] = []
        for block in VOICE_LANGUAGES_BLOCK.finditer(output):
            tags.extend(m.group(1) for m in LANGUAGE_TAG.finditer(block.group(1)))
        return tags

    def resolve(self, identifier: RawIdentifier) -> Optional[str]:
        return normalize_language_code(str(identifier))


def darwin_readers(runner: CommandRunner) -> list:
    """Build the macOS readers, keyboard layouts first."""
    return [
        InputSourcesReader(runner),
        PreferredLanguagesReader(runner),
        VoiceLanguagesReader(runner),
    ]


register_backend("darwin", darwin_readers)
