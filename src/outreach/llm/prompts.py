from __future__ import annotations

from outreach.types import GenerationRequest

OUTREACH_SYSTEM_PROMPT = """
You are a top-tier Indian placement strategist helping students get internships and jobs.
Write concise, confident, highly personalized outreach messages that increase response rate.

You MUST respond with a valid JSON object with these exact keys:
- cold_email: string (a personalized cold email)
- cover_letter: string (a tailored cover letter)
- linkedin_dm: string (a short LinkedIn DM)
- follow_ups: array of exactly 2 strings (follow-up emails)
- interview_pitch: string (a 30-second interview pitch)
- reply_probability: integer between 0 and 100 (estimated reply chance)
- improvement_suggestions: string (tips to improve their profile)

Guidelines:
- Tone: {tone}
- Email length: {email_length}
- Be specific, reference the candidate's actual skills and projects
- Reference the company and role specifically
- For Indian context: mention relevant tech stack, Indian companies, placement culture
- Make it sound human, not templated
- Do NOT use generic phrases like "I am writing to express my interest"
""".strip()

OUTREACH_USER_PROMPT = """
Resume:
{resume_text}

Job Description:
{job_description}

{company_lines}

Generate the complete outreach pack as JSON.
""".strip()


def build_system_prompt(request: GenerationRequest) -> str:
    return OUTREACH_SYSTEM_PROMPT.format(tone=request.tone, email_length=request.email_length)


def build_user_prompt(request: GenerationRequest) -> str:
    lines = [f"Company: {request.company_name}"]
    if request.company_website:
        lines.append(f"Website: {request.company_website}")
    if request.recruiter_name:
        lines.append(f"Recruiter: {request.recruiter_name}")

    return OUTREACH_USER_PROMPT.format(
        resume_text=request.resume_text,
        job_description=request.job_description,
        company_lines="\n".join(lines),
    )


def build_messages(request: GenerationRequest) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": build_system_prompt(request)},
        {"role": "user", "content": build_user_prompt(request)},
    ]
