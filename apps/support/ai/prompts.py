# PATH: apps/support/ai/prompts.py
# 펫 이미지 / 펫 조언 프롬프트

PET_IMAGE_PROMPT = """Create a cute, friendly cartoon pet character for a middle school learning app.
Pet name: {name}
Pet description: {description}
Style: Adorable, colorful, anime-inspired, suitable for children aged 12-16.
The pet should look happy, friendly and encourage learning. Simple, clean design with bright colors."""

PET_ADVICE_SYSTEM_PROMPT = (
    "你是一个友善的虚拟宠物，你的任务是鼓励中学生完成学习任务。"
    "请用温暖、积极的语气，给出简短的鼓励或建议（不超过50字）。"
)

PET_ADVICE_USER_PROMPT = (
    "我的小主人{student_name}让我达到了{level}级，经验值{experience}。"
    "请给我的小主人一些鼓励的话。"
)


def build_pet_image_prompt(name: str, description: str) -> str:
    return PET_IMAGE_PROMPT.format(name=name, description=description)


def build_pet_advice_prompts(*, student_name: str, level: int, experience: int) -> tuple[str, str]:
    """(system, user)"""
    user = PET_ADVICE_USER_PROMPT.format(
        student_name=student_name,
        level=level,
        experience=experience,
    )
    return PET_ADVICE_SYSTEM_PROMPT, user
