"""Shared test configuration: deterministic settings and a fake oracle."""

import os

# Must be set before config.settings is first imported
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["GEMINI_API_KEY"] = ""

from typing import Any

import pytest


class FakeOracle:
    """Deterministic stand-in for the Gemini oracle.

    ``json_payloads`` are returned in order by generate_json; the last one
    repeats. Every prompt is recorded for assertions.
    """

    def __init__(
        self,
        *json_payloads: Any,
        text: str = "Dear Hiring Manager,\n\nI am excited to apply.",
        error: Exception | None = None,
    ) -> None:
        self.json_payloads = list(json_payloads)
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate_json(self, prompt: str) -> Any:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        if len(self.json_payloads) > 1:
            return self.json_payloads.pop(0)
        return self.json_payloads[0] if self.json_payloads else None

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


RESUME_PAYLOAD = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "555-0100",
    "location": "Austin, TX",
    "skills": {
        "technical": ["React", "Node.js", "Python", "Docker"],
        "soft": ["Communication"],
    },
    "experience": [
        {
            "title": "Senior Software Engineer",
            "company": "Acme",
            "startDate": "Jan 2019",
            "endDate": "Jan 2023",
            "description": "Built React and Node.js services; ran Python tooling.",
        },
        {
            "title": "Software Engineer",
            "company": "Initech",
            "startDate": "Jan 2017",
            "endDate": "Jan 2019",
            "description": "Developed Python APIs.",
        },
    ],
    "education": [
        {"institution": "State University", "degree": "B.S.", "field": "Computer Science"},
    ],
    "rawText": (
        "Jane Doe. Senior Software Engineer at Acme. React, Node.js, Python, Docker. "
        "Built React dashboards and Python pipelines. Python scripting."
    ),
}

JOB_PAYLOAD = {
    "title": "Full Stack Engineer",
    "company": "Globex",
    "description": "We need 5+ years of experience building web apps. Bachelor's degree required.",
    "requiredSkills": ["React", "AWS", "Python"],
    "preferredSkills": ["Docker", "Kubernetes"],
    "responsibilities": ["Build React front ends", "Operate AWS infrastructure"],
    "rawText": (
        "Full Stack Engineer. React, AWS, Python. Kubernetes and Docker preferred. "
        "AWS Lambda, AWS ECS, Kubernetes operators, Kubernetes upgrades, Kubernetes security, "
        "Kubernetes networking. 5+ years of experience. Bachelor's degree required."
    ),
}


@pytest.fixture
def resume_payload() -> dict:
    return {**RESUME_PAYLOAD}


@pytest.fixture
def job_payload() -> dict:
    return {**JOB_PAYLOAD}
