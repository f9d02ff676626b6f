"""Prompt template for the resume / job description fit analysis."""


def build_analysis_prompt(resume_text: str, job_description: str) -> str:
    """Embed both texts verbatim in the fixed ATS evaluation template.

    The template is emitted in full even when either text is empty.
    """
    return f"""You are an expert ATS (Applicant Tracking System) evaluator and technical recruiter.

Compare the RESUME against the JOB DESCRIPTION and judge how well the candidate fits the role.

RESUME:
---
{resume_text}
---

JOB DESCRIPTION:
---
{job_description}
---

EVALUATION RULES:
- Treat a keyword as matched when the resume states it or a clear paraphrase of it
  (e.g. "JS" for "JavaScript", "led a team" for "team leadership").
- Prioritize technical skills, role titles, tools/frameworks and certifications over generic soft skills.
- Be conservative: when evidence is unclear, count the keyword as missing and lower the score.
- atsScore is an integer from 0 (no fit) to 100 (exceptional fit).
- summary is 2-3 sentences explaining the score.
- strengths and suggestions are short, specific, actionable statements.

Respond with ONLY compact valid JSON (no markdown, no code fences, no commentary) in this exact structure:
{{"atsScore": <integer 0-100>, "matchedKeywords": [<keywords found in BOTH resume and JD>], "missingKeywords": [<important JD keywords NOT found in resume>], "summary": "<string>", "strengths": [<strings>], "suggestions": [<strings>]}}"""
