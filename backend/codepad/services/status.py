"""Judge0 status ids and how each one is rendered for the editor.

STATUS_RULES is the single place that decides which decoded payloads are
shown for a finished submission. Ids not listed fall back to UNKNOWN_RULE.
"""
from dataclasses import dataclass

from codepad.schemas.run import ExecutionResult
from codepad.services.encoding import decode_base64

IN_QUEUE = 1
PROCESSING = 2
NON_TERMINAL = frozenset({IN_QUEUE, PROCESSING})

NO_OUTPUT_NOTE = "Code executed successfully (no output)"


@dataclass(frozen=True)
class Section:
    field: str  # stdout | stderr | compile_output
    title: str | None = None


@dataclass(frozen=True)
class StatusRule:
    label: str
    heading: str | None
    sections: tuple[Section, ...] = ()
    empty_note: str | None = None


_STDOUT = Section("stdout", "Output:")
_STDERR = Section("stderr", "Error Details:")

STATUS_RULES: dict[int, StatusRule] = {
    3: StatusRule("Accepted", None, (_STDOUT,), empty_note=NO_OUTPUT_NOTE),
    4: StatusRule("Wrong Answer", "Wrong Answer", (_STDOUT,)),
    5: StatusRule("Time Limit Exceeded", "Time Limit Exceeded"),
    6: StatusRule(
        "Compilation Error", "Compilation Error:", (Section("compile_output"),)
    ),
    7: StatusRule(
        "Runtime Error (SIGSEGV)", "Runtime Error (Segmentation Fault)", (_STDERR,)
    ),
    8: StatusRule(
        "Runtime Error (SIGXFSZ)", "Runtime Error (File Size Limit Exceeded)"
    ),
    9: StatusRule("Runtime Error (SIGFPE)", "Runtime Error (Floating Point Exception)"),
    10: StatusRule("Runtime Error (SIGABRT)", "Runtime Error (Aborted)"),
    11: StatusRule(
        "Runtime Error (NZEC)", "Runtime Error (Non-zero Exit Code)", (_STDERR,)
    ),
    12: StatusRule("Runtime Error (Other)", "Runtime Error", (_STDERR,)),
    13: StatusRule("Internal Error", "Internal Error: Please try again later"),
    14: StatusRule("Exec Format Error", "Execution Format Error"),
}

UNKNOWN_RULE = StatusRule(
    "Unknown",
    None,
    (
        Section("stdout", "Output:"),
        Section("stderr", "Errors:"),
        Section("compile_output", "Compilation:"),
    ),
)


def is_terminal(status_id: int) -> bool:
    return status_id not in NON_TERMINAL


def status_label(status_id: int) -> str:
    if status_id == IN_QUEUE:
        return "In Queue"
    if status_id == PROCESSING:
        return "Processing"
    return STATUS_RULES.get(status_id, UNKNOWN_RULE).label


def _section_text(section: Section, decoded: str, separate: bool) -> str:
    if section.title is None:
        return decoded
    prefix = "\n" if separate else ""
    return f"{prefix}{section.title}\n{decoded}"


def format_result(result: ExecutionResult) -> str:
    status = result.status
    rule = STATUS_RULES.get(status.id)
    if rule is None:
        rule = UNKNOWN_RULE
        output = f"Unknown Status ({status.id}): {status.description}\n"
        separate = True
    else:
        output = f"{rule.heading}\n" if rule.heading else ""
        separate = False

    shown = False
    for section in rule.sections:
        raw = getattr(result, section.field)
        if not raw:
            continue
        output += _section_text(section, decode_base64(raw), separate)
        shown = True
    if not shown and rule.empty_note:
        output += rule.empty_note

    output += "\n\n--- Execution Info ---"
    output += f"\nStatus: {status.description} ({status.id})"
    output += f"\nTime: {result.time or 'N/A'}s"
    output += f"\nMemory: {result.memory or 'N/A'} KB"
    return output
