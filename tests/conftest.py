import copy
import json

import pytest
from fastapi.testclient import TestClient

from careermap.agents.llm.base import LLMClient
from careermap.agents.workflow import RoadmapGenerator
from careermap.main import create_app
from careermap.sessions import SessionStore


SAMPLE_ROADMAP = {
    "career": "Data Scientist",
    "description": "Turn data into decisions.",
    "overview": "Data scientists combine statistics, programming and domain knowledge.",
    "marketDemand": "Strong demand across finance, health and tech.",
    "averageSalary": "$95,000 - $160,000",
    "keySkills": ["Statistics", "Python", "SQL", "Machine Learning"],
    "paths": [
        {
            "id": "foundations",
            "title": "Foundations",
            "description": "Math and programming basics",
            "category": "Core",
            "estimatedDuration": "3-4 months",
            "skills": [
                {
                    "id": "python",
                    "title": "Python Programming",
                    "description": "Write clean analysis code",
                    "level": "beginner",
                    "estimatedTime": "4-6 weeks",
                    "prerequisites": [],
                    "resources": [
                        {
                            "type": "documentation",
                            "title": "Python Tutorial",
                            "url": "https://docs.python.org/3/tutorial/",
                            "description": "The official tutorial",
                        },
                        {
                            "type": "book",
                            "title": "Python for Data Analysis",
                            "description": "Pandas from its author",
                        },
                    ],
                },
                {
                    "id": "stats",
                    "title": "Statistics",
                    "description": "Probability and inference",
                    "level": "intermediate",
                    "estimatedTime": "6-8 weeks",
                    "prerequisites": ["Python Programming"],
                    "resources": [],
                },
            ],
        },
        {
            "id": "ml",
            "title": "Machine Learning",
            "description": "Modeling in practice",
            "category": "Specialization",
            "estimatedDuration": "6-9 months",
            "skills": [
                {
                    "id": "supervised",
                    "title": "Supervised Learning",
                    "description": "Regression and classification",
                    "level": "advanced",
                    "estimatedTime": "8-10 weeks",
                    "prerequisites": ["Statistics", "Python Programming"],
                    "resources": [
                        {
                            "type": "project",
                            "title": "Kaggle Competition",
                            "url": "https://www.kaggle.com/competitions",
                            "description": "End-to-end practice",
                        },
                    ],
                },
            ],
        },
    ],
}


class FakeLLM(LLMClient):
    """Records prompts; replies with a fixed text or raises a fixed error."""

    def __init__(self, reply: str = "", error: Exception | None = None):
        self.reply = reply
        self.error = error
        self.calls = []

    def generate_text(self, *, prompt: str, temperature: float | None = None) -> str:
        self.calls.append({"prompt": prompt, "temperature": temperature})
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def sample_roadmap():
    return copy.deepcopy(SAMPLE_ROADMAP)


@pytest.fixture
def fake_llm_cls():
    return FakeLLM


@pytest.fixture
def llm(sample_roadmap):
    return FakeLLM(reply="```json\n" + json.dumps(sample_roadmap, indent=2) + "\n```")


@pytest.fixture
def api_keys():
    return []


@pytest.fixture
def store(llm, api_keys):
    def factory(api_key: str) -> RoadmapGenerator:
        api_keys.append(api_key)
        return RoadmapGenerator(llm)

    return SessionStore(generator_factory=factory)


@pytest.fixture
def client(store):
    app = create_app(store)
    with TestClient(app) as c:
        yield c
