import re
from dataclasses import dataclass
from typing import Optional
from .errors import EmptyCompletionError, MissingColorError

HEX_COLOR_RE = re.compile(r"#[0-9a-fA-F]{6}")
IMAGERY_LABEL = "Imagery: "


@dataclass(frozen=True)
class ColorResult:
    color: str
    raw_output: str
    imagery: Optional[str] = None


def extract_color(output: Optional[str]) -> ColorResult:
    """Parse a completion into a ColorResult.

    The imagery is the first line with its label removed. The color is the
    first ``#rrggbb`` token found anywhere in the text, wherever the model put it.
    """
    if not output:
        raise EmptyCompletionError("No response from API")
    first_line = output.split("\n", 1)[0]
    imagery = first_line.replace(IMAGERY_LABEL, "", 1).strip()
    m = HEX_COLOR_RE.search(output)
    if not m:
        raise MissingColorError("No valid color found in response")
    return ColorResult(color=m.group(0), raw_output=output, imagery=imagery)
