"""
System prompt text for the Tanqory assistant.

The persona prompt always comes first in a request, followed by the company
memory block; both are plain strings built here without I/O.
"""

from tanqory_ai.ai.chat.schemas import ChatOptions, Tone

ASSISTANT_NAME = "Tanqory AI"

TONE_INSTRUCTIONS: dict[Tone, str] = {
    Tone.BALANCED: "ตอบอย่างกระชับแต่ให้รายละเอียดสำคัญครบถ้วน",
    Tone.DETAILED: "ตอบแบบละเอียด มีขั้นตอนและตัวอย่างประกอบ",
    Tone.CONCISE: "ตอบสั้น ๆ ตรงประเด็น สรุปให้เข้าใจง่าย",
}

MEMORY_HEADING = "Company Memory (สรุปรวม):"


def build_persona_prompt(options: ChatOptions) -> str:
    """Build the instruction block: identity, user, tone and memory directive.

    Args:
        options: Identity and tone for this request

    Returns:
        str: The system instruction text
    """
    tone_instruction = TONE_INSTRUCTIONS[options.tone]
    return (
        f"คุณคือ {ASSISTANT_NAME} ที่ช่วยเหลือทีมในบทบาท {options.persona}. "
        f"ผู้ใช้ชื่อ {options.user_name} ({options.email}). "
        f"{tone_instruction}. "
        "หากข้อมูลไม่พอให้แจ้งผู้ใช้และเสนอแนวทางต่อ. "
        "อ้างอิง Company Memory ที่ให้มาด้านล่างด้วย."
    )


def build_memory_block(memory: str) -> str:
    """Label the merged memory as reference material."""
    return f"{MEMORY_HEADING}\n{memory}"
