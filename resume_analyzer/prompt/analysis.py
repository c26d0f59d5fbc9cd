from __future__ import annotations

RESPONSE_SCHEMA_SKELETON = """{
  "resumeScore": <number 0-100>,
  "matchPercentage": <number 0-100 or null if no job description provided>,
  "strengths": [
    "<strength bullet 1>",
    "<strength bullet 2>",
    "<strength bullet 3>",
    "<strength bullet 4>",
    "<strength bullet 5>"
  ],
  "weaknesses": [
    "<weakness bullet 1>",
    "<weakness bullet 2>",
    "<weakness bullet 3>",
    "<weakness bullet 4>",
    "<weakness bullet 5>"
  ]
}"""

BULLET_COUNT = 5

_TEMPLATE = """You are a helpful assistant that analyzes resumes and job descriptions.

I will provide text for a resume, and optionally a job description.

Your task is to:

1. Score the resume between 0 and 100 for job fit.
2. List {bullets} bullet points of the **strengths** of the resume.
3. List {bullets} bullet points of the **weaknesses** or areas to improve.
4. If a job description is provided, compute a **match percentage** based on how well the resume aligns with the job.
5. Provide concise and clear output in JSON format.

Output format MUST be exactly:

{schema}

Criteria:
- Score should reflect clarity, relevance, keywords, structure, and job description alignment (if provided).
- matchPercentage is ONLY computed if a job description is provided, else set it to null.
- Strengths should highlight positive aspects of the resume (skills, achievements, clarity).
- Weaknesses should highlight suggestions for improvement (missing keywords, unclear formatting, lack of results, etc.)

Here is the resume text:
{resume_text}

Here is the job description text (leave blank if none):
{job_description}

Respond ONLY with valid JSON. Do not include any other text or markdown formatting."""


def has_job_description(job_description: str | None) -> bool:
    return bool(job_description and job_description.strip())


def build_analysis_prompt(resume_text: str, job_description: str | None = None) -> str:
    return _TEMPLATE.format(
        bullets=BULLET_COUNT,
        schema=RESPONSE_SCHEMA_SKELETON,
        resume_text=resume_text,
        job_description=job_description if has_job_description(job_description) else "",
    )
