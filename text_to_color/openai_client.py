import hashlib
from typing import Dict, List, Optional, Sequence
from openai import OpenAI
from .colors import hsl_to_hex
from .config import Settings, get_settings
from .errors import CompletionError
from .extract import ColorResult, extract_color
from .prompts import build_messages
from .utils.logging import get_logger

log = get_logger(__name__)

# one retry after the first attempt, no delay in between
MAX_RETRIES = 1


class CompletionClient:
    """Asks the chat completion API for a color and parses the answer."""

    def __init__(self, settings: Optional[Settings] = None, client: Optional[OpenAI] = None):
        self.settings = settings or get_settings()
        self._client = client

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            # SDK-level retries are off so MAX_RETRIES is the only retry policy
            self._client = OpenAI(
                api_key=self.settings.openai_api_key,
                timeout=self.settings.openai_timeout,
                max_retries=0,
            )
        return self._client

    def generate(self, text: str, history: Optional[Sequence[Dict[str, str]]] = None, keep_history: bool = False) -> ColorResult:
        messages = build_messages(text, history, keep_history)
        _log_request(text, messages, keep_history)

        last_error = None
        for attempt in range(MAX_RETRIES + 1):
            try:
                result = extract_color(self._complete(messages))
                log.info(f"Extracted color {result.color} for {text!r}")
                return result
            except Exception as e:
                last_error = e
                if attempt < MAX_RETRIES:
                    log.warning(f"Initial attempt failed for {text!r}, retrying: {e}")
                else:
                    log.warning(f"Retry {attempt} failed for {text!r}: {e}")
        if isinstance(last_error, CompletionError):
            raise last_error
        raise CompletionError(f"Completion request failed: {last_error}") from last_error

    def _complete(self, messages: List[Dict[str, str]]) -> Optional[str]:
        resp = self.client.chat.completions.create(
            model=self.settings.openai_model,
            messages=messages,
            response_format={"type": "text"},
            temperature=0,
            max_tokens=self.settings.openai_max_tokens,
            top_p=1,
            frequency_penalty=0,
            presence_penalty=0,
        )
        if not resp.choices:
            return None
        return resp.choices[0].message.content


class MockCompletionClient:
    """Deterministic stand-in used when USE_MOCK_OPENAI is set."""

    def __init__(self):
        self.calls = 0

    def generate(self, text: str, history: Optional[Sequence[Dict[str, str]]] = None, keep_history: bool = False) -> ColorResult:
        self.calls += 1
        digest = hashlib.sha256(text.strip().lower().encode("utf-8")).digest()
        hue = digest[0] * 360 // 256
        saturation = 40 + digest[1] % 21
        lightness = 40 + digest[2] % 21
        output = (
            f"Imagery: {text.strip()}\n"
            f"Hue: {hue} (Derived from the text.)\n"
            f"Saturation: {saturation}%\n"
            f"Lightness: {lightness}%\n"
            f"{hsl_to_hex(hue, saturation, lightness)}"
        )
        return extract_color(output)


def get_completion_client(settings: Optional[Settings] = None):
    settings = settings or get_settings()
    if settings.use_mock_openai:
        log.info("Using mock completion client")
        return MockCompletionClient()
    return CompletionClient(settings)


def _log_request(text: str, messages: List[Dict[str, str]], keep_history: bool):
    users = [m for m in messages if m["role"] == "user"]
    assistants = [m for m in messages if m["role"] == "assistant"]
    log.info(
        f"Sending {len(messages)} messages for {text!r} "
        f"(keep_history={keep_history}, user={len(users)}, assistant={len(assistants)})"
    )
