import io
from typing import Iterable, List

from unidiff import PatchSet, PatchedFile
from unidiff.errors import UnidiffParseError

from errors import DiffCollectionError


def load_patch(diff_text: str) -> PatchSet:
    try:
        # lines end at "\n" only; form feeds and lone "\r" stay inside a line
        return PatchSet(io.StringIO(diff_text, newline="\n"))
    except UnidiffParseError as e:
        raise DiffCollectionError(f"Could not parse staged diff: {e}") from e


def file_extension(path: str) -> str:
    # text after the last dot; a name without a dot is its own extension
    return path.lower().rsplit(".", 1)[-1]


def is_risky(path: str, risky_exts: Iterable[str]) -> bool:
    return file_extension(path) in risky_exts


def target_path(patched_file: PatchedFile) -> str:
    """
    Path of the file after the change (``b/`` prefix removed), or the
    source path when there is no target side.
    """
    target = patched_file.target_file or ""
    if target and target != "/dev/null":
        return target[2:] if target.startswith("b/") else target
    source = patched_file.source_file or ""
    return source[2:] if source.startswith("a/") else source


def select_risky_files(patch: PatchSet, risky_exts: Iterable[str]) -> List[PatchedFile]:
    risky_exts = frozenset(risky_exts)
    return [pf for pf in patch if is_risky(target_path(pf), risky_exts)]


def _range(start: int, length: int) -> str:
    # git leaves out the count when it is 1
    return str(start) if length == 1 else "%d,%d" % (start, length)


def _hunk_header(hunk) -> str:
    header = "@@ -%s +%s @@" % (
        _range(hunk.source_start, hunk.source_length),
        _range(hunk.target_start, hunk.target_length),
    )
    if hunk.section_header:
        header += " " + hunk.section_header
    return header


def render_changed_lines(patched_files: Iterable[PatchedFile], max_lines: int) -> str:
    """
    Flatten the given files into the text sent for review.

    Each file contributes its ``---``/``+++`` lines, then every hunk's
    position marker with its added and removed lines. Context lines are
    dropped. The result is capped at the first ``max_lines`` lines.
    """
    keep: List[str] = []
    for patched_file in patched_files:
        if not len(patched_file):
            continue
        keep.append(f"--- {patched_file.source_file}")
        keep.append(f"+++ {patched_file.target_file}")
        for hunk in patched_file:
            keep.append(_hunk_header(hunk))
            for line in hunk:
                if line.is_added:
                    keep.append("+" + line.value.rstrip("\n"))
                elif line.is_removed:
                    keep.append("-" + line.value.rstrip("\n"))

    if len(keep) > max_lines:
        keep = keep[:max_lines]
    return "\n".join(keep)

