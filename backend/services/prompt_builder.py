"""All prompt templates for oracle calls.

Each JSON prompt has a matching tuple of expected top-level keys that the
orchestrator checks before normalizing the answer.
"""

from models.schemas.job_description import JobDescription
from models.schemas.match_result import MatchResult
from models.schemas.resume import Resume

RESUME_KEYS = ("skills",)
JOB_KEYS = ("requiredSkills",)
JUDGMENT_KEYS = ("overallPercentage|matchPercentage",)
KEYWORD_KEYS = ("clusters",)
FEEDBACK_KEYS = ("strengths", "weaknesses", "tips")


def _resume_json(resume: Resume, include_raw: bool = True) -> str:
    exclude = None if include_raw else {"raw_text"}
    return resume.model_dump_json(by_alias=True, exclude=exclude, exclude_none=True)


def _job_json(job: JobDescription, include_raw: bool = True) -> str:
    exclude = {"benefits"} if include_raw else {"benefits", "raw_text"}
    return job.model_dump_json(by_alias=True, exclude=exclude, exclude_none=True)


def build_resume_parsing_prompt(text: str) -> str:
    return f"""You are a resume parser. Extract structured information from the resume below.

Rules:
- Copy values from the resume; do not invent anything that is not there.
- Split skills into "technical" (languages, tools, platforms, methods) and "soft" (interpersonal skills).
- Use "Present" as endDate for current roles.
- Use "" for unknown strings and [] for unknown lists.

RESUME TEXT:
---
{text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "name": "<full name>",
  "email": "<email address>",
  "phone": "<phone number>",
  "location": "<city, region>",
  "skills": {{
    "technical": [<technical skills>],
    "soft": [<soft skills>]
  }},
  "experience": [
    {{
      "title": "<job title>",
      "company": "<company name>",
      "location": "<city, region>",
      "startDate": "<Month Year>",
      "endDate": "<Month Year or Present>",
      "description": "<role description>"
    }}
  ],
  "education": [
    {{
      "institution": "<school name>",
      "degree": "<degree type>",
      "field": "<field of study>",
      "startDate": "<Month Year>",
      "endDate": "<Month Year>",
      "gpa": "<GPA if available>"
    }}
  ]
}}"""


def build_job_parsing_prompt(text: str) -> str:
    return f"""You are a job description parser. Extract structured information from the posting below.

Rules:
- "requiredSkills" are skills the posting states as required or must-have.
- "preferredSkills" are nice-to-have, preferred or bonus skills.
- Keep each skill short (1-4 words), in its most common professional spelling.
- Use "" for unknown strings and [] for unknown lists.

JOB DESCRIPTION TEXT:
---
{text}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "title": "<job title>",
  "company": "<company name>",
  "location": "<location>",
  "description": "<2-3 sentence summary of the role>",
  "requiredSkills": [<required skills>],
  "preferredSkills": [<preferred skills>],
  "responsibilities": [<main responsibilities>],
  "benefits": [<benefits offered>]
}}"""


def build_comparison_prompt(resume: Resume, job: JobDescription) -> str:
    """Holistic judgment only: skill matching and category scores are computed locally."""
    return f"""You are an expert resume matching assistant. Judge how well this resume fits the job.

SCORING RUBRIC (follow strictly):
- 0-20:  No relevant match. Resume is for a completely different field.
- 20-40: Weak match. Some transferable skills but major gaps in core requirements.
- 40-60: Moderate match. Meets some key requirements but missing several important ones.
- 60-80: Strong match. Meets most requirements with minor gaps.
- 80-100: Exceptional match. Meets or exceeds nearly all requirements.

RESUME:
---
{_resume_json(resume)}
---

JOB DESCRIPTION:
---
{_job_json(job)}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "overallPercentage": <integer 0-100>,
  "strengths": [<3-5 specific strengths with evidence from the resume>],
  "improvementAreas": [<3-5 specific gaps with reference to the job requirements>],
  "summary": "<2-3 sentence explanation of the score>"
}}"""


def build_keyword_prompt(job: JobDescription, max_keywords: int = 40) -> str:
    """Keyword discovery and clustering in one call; counting happens locally."""
    return f"""You are an expert ATS (Applicant Tracking System) consultant.

Identify the most important keywords in the job description below: specific skills,
tools, technologies, qualifications and domain terms a recruiter would search for.

Rules:
- Return at most {max_keywords} keywords.
- Remove duplicates and near-duplicates (e.g. "React" and "React.js"); keep the most common professional form.
- Use the exact spelling that appears in the job description where possible.
- Drop generic terms that are not skills or qualifications (e.g. "team", "opportunity").
- Group the keywords into 3-8 clusters such as "Technical Skills", "Soft Skills", "Domain Knowledge", "DevOps".
- Every keyword belongs to exactly one cluster.

JOB DESCRIPTION:
---
{_job_json(job)}
---

Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "clusters": {{
    "<cluster name>": [<keywords>]
  }}
}}"""


def _match_context(match: MatchResult | None) -> str:
    if match is None:
        return ""
    return f"""
MATCH ANALYSIS (already computed, use as context):
- Overall score: {match.overall_score}/100
- Matched skills: {', '.join(match.matched_skills) or 'none'}
- Missing skills: {', '.join(match.missing_skills) or 'none'}
- Improvement areas: {'; '.join(match.improvement_areas) or 'none'}
---
"""


def build_cover_letter_prompt(
    resume: Resume,
    job: JobDescription,
    match: MatchResult | None = None,
    custom_instructions: str = "",
) -> str:
    instructions = f"\nAdditional instructions: {custom_instructions}\n" if custom_instructions else ""
    return f"""You are a professional cover letter writer.

Write a personalized, compelling cover letter for this candidate and job.
Highlight the candidate's relevant skills and experience that match the job requirements.
Do not claim skills the resume does not show.
{instructions}{_match_context(match)}
RESUME:
---
{_resume_json(resume, include_raw=False)}
---

JOB DESCRIPTION:
---
{_job_json(job, include_raw=False)}
---

Respond with the cover letter text only."""


def build_feedback_prompt(
    resume: Resume,
    job: JobDescription | None = None,
    match: MatchResult | None = None,
) -> str:
    job_section = ""
    if job is not None:
        job_section = f"""
JOB DESCRIPTION:
---
{_job_json(job, include_raw=False)}
---

Tailor the feedback to how well the resume matches this specific job description.
"""

    return f"""You are a professional resume reviewer. Provide constructive and actionable feedback.

Analyze the resume and provide:
1. Three strengths of the resume
2. Three weaknesses or areas for improvement
3. Three specific tips to improve the resume
{_match_context(match)}
RESUME:
---
{_resume_json(resume)}
---
{job_section}
Respond with ONLY valid JSON (no markdown, no code fences) in this exact structure:
{{
  "strengths": ["<strength>", "<strength>", "<strength>"],
  "weaknesses": ["<weakness>", "<weakness>", "<weakness>"],
  "tips": ["<tip>", "<tip>", "<tip>"]
}}"""
