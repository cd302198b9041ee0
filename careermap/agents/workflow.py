# careermap/agents/workflow.py
import logging
import re

from pydantic import ValidationError

from careermap.agents.fallback import fallback_roadmap
from careermap.agents.llm.base import LLMClient
from careermap.agents.llm.client import get_llm_client
from careermap.agents.schemas import CareerRoadmap
from careermap.errors import RoadmapDecodeError
from careermap.settings import settings

logger = logging.getLogger(__name__)

# Opening fence on its own line (optional language tag), and a closing
# fence at the end of a line. Backticks inside string values are kept.
_OPEN_FENCE_RE = re.compile(r"^[ \t]*```[\w+-]*[ \t]*(?:\n|$)", re.M)
_CLOSE_FENCE_RE = re.compile(r"```[ \t]*$", re.M)


def build_roadmap_prompt(career: str, experience: str, goals: str) -> str:
    return f"""
Create a career roadmap for "{career}" in JSON format.

Experience: {experience}
Goals: {goals}

Return this exact JSON structure:
{{
  "career": "{career}",
  "description": "Brief career description",
  "overview": "Career overview and opportunities",
  "marketDemand": "Market demand information",
  "averageSalary": "Salary range",
  "keySkills": ["skill1", "skill2", "skill3"],
  "paths": [
    {{
      "id": "path1",
      "title": "Learning Path Name",
      "description": "Path description",
      "category": "Category",
      "estimatedDuration": "6-12 months",
      "skills": [
        {{
          "id": "skill1",
          "title": "Skill Name",
          "description": "Skill description",
          "level": "beginner",
          "estimatedTime": "2-4 weeks",
          "prerequisites": [],
          "resources": [
            {{
              "type": "course",
              "title": "Resource Name",
              "url": "https://example.com",
              "description": "Resource description"
            }}
          ]
        }}
      ]
    }}
  ]
}}

Rules:
- "level" must be one of: beginner, intermediate, advanced.
- "type" must be one of: course, book, documentation, project, tutorial.
- Create 2-3 paths with 3-5 skills each.
- Return ONLY valid JSON (no markdown, no code fences, no commentary).
""".strip()


def strip_code_fences(text: str) -> str:
    text = _OPEN_FENCE_RE.sub("", text)
    return _CLOSE_FENCE_RE.sub("", text).strip()


def clean_model_output(text: str) -> str:
    """
    Strip code fences, then keep only the span from the first "{" to the
    last "}". If there is no such span the fence-stripped text is returned
    as is and decoding fails downstream.
    """
    cleaned = strip_code_fences(text)

    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        cleaned = cleaned[start:end + 1]
    return cleaned


def decode_roadmap(text: str) -> CareerRoadmap:
    cleaned = clean_model_output(text)
    if not cleaned.startswith("{"):
        raise RoadmapDecodeError("No JSON object found in model output")

    try:
        return CareerRoadmap.model_validate_json(cleaned)
    except ValidationError as e:
        raise RoadmapDecodeError(
            f"Model output is not a valid roadmap ({e.error_count()} errors): {e}"
        ) from e


class RoadmapGenerator:
    """
    Prompt/response adapter around one LLM client. generate() always returns
    a roadmap: transport and decode failures resolve to fallback_roadmap().
    """

    def __init__(self, llm: LLMClient, *, temperature: float | None = None):
        self.llm = llm
        self.temperature = temperature

    def generate(self, career: str, experience: str, goals: str) -> CareerRoadmap:
        prompt = build_roadmap_prompt(career, experience, goals)

        try:
            raw_text = self.llm.generate_text(prompt=prompt, temperature=self.temperature)
        except Exception:
            logger.exception("Roadmap generation failed for career=%r, using fallback", career)
            return fallback_roadmap(career, experience, goals)

        try:
            roadmap = decode_roadmap(raw_text)
        except RoadmapDecodeError as e:
            logger.warning("Could not decode roadmap for career=%r, using fallback: %s", career, e)
            logger.debug("Raw model output: %s", raw_text)
            return fallback_roadmap(career, experience, goals)

        logger.info("Generated roadmap for career=%r with %d paths", career, len(roadmap.paths))
        return roadmap


def build_generator(api_key: str) -> RoadmapGenerator:
    return RoadmapGenerator(get_llm_client(api_key), temperature=settings.llm_temperature)
