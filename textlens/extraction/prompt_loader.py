from pathlib import Path

from textlens.extraction.exceptions import ExtractionError
from textlens.extraction.models import ExtractionMode

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"

_PROMPT_FILES = {
    ExtractionMode.PLAIN_TEXT: "plain_text_prompt.txt",
    ExtractionMode.TABULAR: "tabular_prompt.txt",
}


def load_instruction(mode: ExtractionMode, prompt_dir: Path | None = None) -> str:
    """Load the extraction instruction for a mode.

    Args:
        mode: Extraction mode selecting the prompt file.
        prompt_dir: Directory holding the prompt files.
                    Defaults to the bundled prompts directory.

    Returns:
        The instruction text with surrounding whitespace removed.

    Raises:
        ExtractionError: if the file cannot be read.
    """
    if prompt_dir is None:
        prompt_dir = _DEFAULT_PROMPT_DIR
    path = prompt_dir / _PROMPT_FILES[mode]
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise ExtractionError(f"Failed to load instruction for mode '{mode.value}': {exc}") from exc
