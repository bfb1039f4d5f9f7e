import yaml
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Sequence

PROMPT_FILE = Path(__file__).parent / "configs" / "color_prompt.yaml"


@lru_cache(maxsize=None)
def load_prompt(path: Path = PROMPT_FILE) -> Dict:
    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if not data.get("system"):
        raise ValueError(f"No system prompt in {path}")
    return data


def prompt_prefix(path: Path = PROMPT_FILE) -> List[Dict[str, str]]:
    """System instruction followed by the few-shot exchanges."""
    data = load_prompt(path)
    messages = [{"role": "system", "content": data["system"]}]
    for ex in data.get("few_shot") or []:
        messages.append({"role": "user", "content": ex["user"]})
        messages.append({"role": "assistant", "content": ex["assistant"]})
    return messages


def build_messages(text: str, history: Optional[Sequence[Dict[str, str]]] = None, keep_history: bool = False) -> List[Dict[str, str]]:
    messages = prompt_prefix()
    if keep_history and history:
        messages.extend({"role": m["role"], "content": m["content"]} for m in history)
    messages.append({"role": "user", "content": text})
    return messages
