from text_to_color.prompts import build_messages, load_prompt, prompt_prefix


def test_prompt_file_has_system_and_examples():
    data = load_prompt()
    assert "hex color" in data["system"]
    assert [ex["user"] for ex in data["few_shot"]] == ["a mountain brook", "a peach", "glow in the dark"]


def test_prefix_is_system_then_alternating_examples():
    prefix = prompt_prefix()
    assert prefix[0]["role"] == "system"
    assert [m["role"] for m in prefix[1:]] == ["user", "assistant"] * 3
    assert prefix[2]["content"].endswith("#4c8c64")


def test_single_turn_ignores_history():
    history = [{"role": "user", "content": "the sea"}, {"role": "assistant", "content": "#1e5f8c"}]
    messages = build_messages("a storm", history, keep_history=False)
    assert len(messages) == len(prompt_prefix()) + 1
    assert messages[-1] == {"role": "user", "content": "a storm"}


def test_keep_history_inserts_history_before_new_turn():
    history = [{"role": "user", "content": "the sea"}, {"role": "assistant", "content": "#1e5f8c"}]
    messages = build_messages("a storm", history, keep_history=True)
    n = len(prompt_prefix())
    assert messages[n:] == history + [{"role": "user", "content": "a storm"}]


def test_keep_history_with_empty_history():
    messages = build_messages("a storm", [], keep_history=True)
    assert messages[-2]["role"] == "assistant"
    assert messages[-1]["content"] == "a storm"


def test_system_prompt_text_is_unchanged():
    system = load_prompt()["system"]
    assert "Try not to use #00000 or #ffffff" in system
    assert system.endswith("#8b705b (hex value)")
