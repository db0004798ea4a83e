from __future__ import annotations

from pathlib import Path

import pytest

from src.oracle.bridge import OracleBridge
from src.oracle.session import Attachment
from src.state.payloads import SpeakText


@pytest.mark.asyncio
async def test_tool_result_continues_the_turn(make_deps) -> None:
    deps = await make_deps(
        replies=[
            '{"tool":"floor","args":[2.5]}',
            '{"type":"enter_digits","digits":"2"}',
        ]
    )
    session = deps.backend.session

    await deps.bridge.prompt("What is the floor of 2.5? Enter it.")

    assert len(session.prompts) == 2
    assert session.prompts[1].startswith("Tool result: 2\n")
    assert session.prompts[1].endswith("Return only the final NEON protocol JSON object.")
    assert deps.channel.sent_payloads == [{"type": "enter_digits", "digits": "2"}]


@pytest.mark.asyncio
async def test_unparseable_reply_ends_the_turn(make_deps) -> None:
    deps = await make_deps(replies=["I believe the answer is 4.", '{"type":"enter_digits","digits":"4"}'])

    await deps.bridge.prompt("Compute something.")

    assert len(deps.backend.session.prompts) == 1
    assert deps.channel.sent == []


@pytest.mark.asyncio
async def test_rejected_speak_text_gets_corrective_prompt(make_deps) -> None:
    deps = await make_deps(
        replies=[
            '{"type":"speak_text","text":"toolong"}',
            '{"type":"speak_text","text":"abc"}',
        ]
    )
    deps.context.current_challenge = "Speak exactly 3 characters."

    await deps.bridge.prompt(deps.context.current_challenge)

    prompts = deps.backend.session.prompts
    assert len(prompts) == 2
    assert prompts[1].startswith("Your previous speak_text payload is invalid.")
    assert "exactly 3 characters, but got 7" in prompts[1]
    assert deps.channel.sent_payloads == [{"type": "speak_text", "text": "abc"}]


@pytest.mark.asyncio
async def test_round_limit_bounds_tool_loops(make_deps) -> None:
    deps = await make_deps(replies=['{"tool":"floor","args":[1]}'] * 10, max_rounds=3)

    await deps.bridge.prompt("loop")
    assert len(deps.backend.session.prompts) == 3

    await deps.bridge.prompt("again")
    assert len(deps.backend.session.prompts) == 6


@pytest.mark.asyncio
async def test_challenge_arriving_mid_chain_gets_its_own_budget(make_deps) -> None:
    deps = await make_deps(
        replies=[
            '{"tool":"floor","args":[1.5]}',
            '{"type":"enter_digits","digits":"1"}',
            '{"type":"enter_digits","digits":"2"}',
        ],
        max_rounds=2,
    )
    session = deps.backend.session
    scripted_send = session.send

    async def send_with_interruption(request):
        if not session.requests:
            await deps.bridge.prompt("Second checkpoint.", attachments=True)
        async for event in scripted_send(request):
            yield event

    session.send = send_with_interruption

    await deps.bridge.prompt("First checkpoint.", attachments=True)

    prompts = session.prompts
    assert prompts[0] == "First checkpoint."
    assert prompts[1].startswith("Tool result: 1\n")
    assert prompts[2] == "Second checkpoint."
    assert deps.channel.sent_payloads == [
        {"type": "enter_digits", "digits": "1"},
        {"type": "enter_digits", "digits": "2"},
    ]


@pytest.mark.asyncio
async def test_gate_follow_up_joins_running_chain(make_deps) -> None:
    deps = await make_deps(
        replies=[
            '{"type":"speak_text","text":"toolong"}',
            '{"type":"speak_text","text":"abc"}',
        ],
        max_rounds=1,
    )
    deps.context.current_challenge = "Speak exactly 3 characters."

    await deps.bridge.prompt(deps.context.current_challenge)

    assert len(deps.backend.session.prompts) == 1
    assert deps.channel.sent == []


@pytest.mark.asyncio
async def test_context_outcome_is_sent_verbatim(make_deps) -> None:
    deps = await make_deps(replies=['{"tool":"getHistory","args":[]}'])
    await deps.history.append(SpeakText(text="Skilled in Python"))
    deps.context.current_challenge = "Recall the second word of your earlier answer."

    await deps.bridge.prompt(deps.context.current_challenge)

    prompts = deps.backend.session.prompts
    assert prompts[1].startswith("Transmission history for current challenge.")
    assert "Skilled in Python" in prompts[1]


@pytest.mark.asyncio
async def test_attachments_follow_prompt_kind(make_deps, tmp_path: Path) -> None:
    deps = await make_deps(
        replies=[
            '{"tool":"floor","args":[3.2]}',
            '{"tool":"getHistory","args":[]}',
        ]
    )
    deps.context.current_challenge = "Recall your previous answer."
    attachment = Attachment.from_path(tmp_path / "notes.txt")
    bridge = OracleBridge(deps.context, max_rounds=5, attachments=(attachment,))
    bridge.bind(gate=deps.gate, tools=deps.tools)

    await bridge.prompt("start", attachments=True)

    requests = deps.backend.session.requests
    assert [request.attachments for request in requests] == [(attachment,), (attachment,), ()]
    assert all(request.mode == "immediate" for request in requests)


@pytest.mark.asyncio
async def test_prompt_without_session_is_dropped(make_deps) -> None:
    deps = await make_deps(replies=['{"type":"enter_digits","digits":"1"}'], with_session=False)

    await deps.bridge.prompt("anything")

    assert deps.backend.session.requests == []
    assert deps.channel.sent == []


@pytest.mark.asyncio
async def test_unbound_bridge_refuses_to_act(make_deps) -> None:
    deps = await make_deps(
        replies=['{"type":"enter_digits","digits":"1"}', '{"type":"enter_digits","digits":"2"}']
    )
    bridge = OracleBridge(deps.context, max_rounds=2)

    with pytest.raises(RuntimeError):
        await bridge.prompt("anything")

    bridge.bind(gate=deps.gate, tools=deps.tools)
    await bridge.prompt("anything")
    assert deps.channel.sent_payloads == [{"type": "enter_digits", "digits": "2"}]
