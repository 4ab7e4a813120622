"""Removing fuelup itself from the system."""

from __future__ import annotations

import shutil

from fuelup.path import FUELUP_DIR, canonical_fuelup_dir, fuelup_bin_dir, fuelup_dir
from fuelup.shell import Shell

_WHOLE_DEFINITION = f"PATH={FUELUP_DIR}"
_PATH_ENTRY = f"{FUELUP_DIR}:"


def _split_lines(text: str) -> list[str]:
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def remove_path_from_content(content: str) -> tuple[bool, str]:
    """Strip the fuelup directory from PATH definitions in a shell start-up file.

    Returns whether anything changed and the new content.
    """
    lines = _split_lines(content.rstrip("\n").rstrip("\r"))
    modified = False
    new_lines = []
    for line in lines:
        if line.rstrip().endswith(_WHOLE_DEFINITION):
            continue
        if "PATH" in line and FUELUP_DIR in line:
            modified = True
            line = line.strip().replace(_PATH_ENTRY, "").replace(FUELUP_DIR, "")
        new_lines.append(line)
    return modified or len(lines) != len(new_lines), "\n".join(new_lines)


def remove_fuelup_from_path() -> None:
    """Remove the fuelup directory from $PATH in every known shell start-up file."""
    for shell in Shell:
        for rc in shell.rc_files():
            if not rc.is_file():
                continue
            was_modified, new_content = remove_path_from_content(
                rc.read_text(encoding="utf-8")
            )
            if was_modified:
                print(f"{rc} has been updated to remove fuelup from $PATH")
                rc.write_text(new_content, encoding="utf-8")


def _ask_yes_no(question: str) -> bool:
    try:
        answer = input(f"{question} ")
    except EOFError as exc:
        raise OSError("Console I/O") from exc
    return answer.strip().lower() in ("y", "yes")


def self_uninstall(force: bool) -> bool:
    """Uninstall every toolchain and the fuelup home, asking first unless ``force``.

    Returns whether the uninstall went ahead.
    """
    print(
        "Thanks for hacking in Sway!\n"
        "This will uninstall all Sway toolchains and data, and remove, "
        f"{canonical_fuelup_dir()}/bin from your PATH environment variable."
    )
    if not (force or _ask_yes_no("Continue? (y/N)")):
        return False

    targets = [
        ("removing fuelup binaries", fuelup_bin_dir()),
        ("removing fuelup home", fuelup_dir()),
    ]
    remove_fuelup_from_path()

    for message, path in targets:
        print(message)
        try:
            shutil.rmtree(path)
        except FileNotFoundError:
            continue
        except OSError as exc:
            raise OSError(f"Failed to remove {path}: {exc}") from exc
    return True