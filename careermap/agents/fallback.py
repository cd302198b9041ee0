## Canned roadmaps: the generation fallback and the "Try Demo" roadmap
from careermap.agents.schemas import CareerRoadmap


def fallback_roadmap(career: str, experience: str, goals: str) -> CareerRoadmap:
    """
    Roadmap returned whenever generation fails. Pure data: it only
    interpolates the career label and cannot fail. Experience and goals are
    accepted for parity with the generator contract but not used.
    """
    return CareerRoadmap.model_validate({
        "career": career,
        "description": f"A comprehensive career path for {career} professionals.",
        "overview": (
            f"{career} is a dynamic field with excellent growth opportunities. "
            "This roadmap will guide you through the essential skills and "
            "knowledge needed to succeed."
        ),
        "marketDemand": "High demand with excellent job prospects and competitive salaries.",
        "averageSalary": "$50,000 - $120,000 depending on experience and location",
        "keySkills": ["Problem Solving", "Communication", "Technical Skills", "Project Management"],
        "paths": [
            {
                "id": "fundamentals",
                "title": "Fundamentals Path",
                "description": "Build your foundation with core concepts and skills",
                "category": "Foundation",
                "estimatedDuration": "3-6 months",
                "skills": [
                    {
                        "id": "basics",
                        "title": "Core Fundamentals",
                        "description": f"Learn the basic concepts and principles of {career}",
                        "level": "beginner",
                        "estimatedTime": "4-6 weeks",
                        "prerequisites": [],
                        "resources": [
                            {
                                "type": "course",
                                "title": f"Introduction to {career}",
                                "url": "https://www.coursera.org",
                                "description": "Comprehensive introduction course",
                            },
                            {
                                "type": "book",
                                "title": f"{career} Handbook",
                                "description": "Essential reading for beginners",
                            },
                        ],
                    },
                    {
                        "id": "practice",
                        "title": "Hands-on Practice",
                        "description": "Apply your knowledge through practical exercises",
                        "level": "intermediate",
                        "estimatedTime": "6-8 weeks",
                        "prerequisites": ["Core Fundamentals"],
                        "resources": [
                            {
                                "type": "project",
                                "title": "Practice Projects",
                                "description": "Build real-world projects to solidify your understanding",
                            },
                        ],
                    },
                ],
            },
            {
                "id": "advanced",
                "title": "Advanced Skills Path",
                "description": "Develop specialized skills and expertise",
                "category": "Specialization",
                "estimatedDuration": "4-8 months",
                "skills": [
                    {
                        "id": "advanced-concepts",
                        "title": "Advanced Concepts",
                        "description": "Master complex topics and advanced techniques",
                        "level": "advanced",
                        "estimatedTime": "8-12 weeks",
                        "prerequisites": ["Core Fundamentals", "Hands-on Practice"],
                        "resources": [
                            {
                                "type": "course",
                                "title": f"Advanced {career} Techniques",
                                "description": "Deep dive into advanced concepts",
                            },
                        ],
                    },
                ],
            },
        ],
    })


DEMO_CAREER = "Software Developer"
DEMO_FIELD = "Software Development"


def demo_roadmap(career: str | None = None) -> CareerRoadmap:
    typed = (career or "").strip()
    career = typed or DEMO_CAREER
    overview_field = typed or DEMO_FIELD
    return CareerRoadmap.model_validate({
        "career": career,
        "description": f"A comprehensive career path for {career} professionals.",
        "overview": f"{overview_field} is a dynamic field with excellent growth opportunities.",
        "marketDemand": "High demand with excellent job prospects.",
        "averageSalary": "$70,000 - $150,000+",
        "keySkills": ["Programming", "Problem Solving", "Web Development", "Database Management"],
        "paths": [
            {
                "id": "frontend",
                "title": "Frontend Development",
                "description": "Master client-side development",
                "category": "Web Development",
                "estimatedDuration": "4-6 months",
                "skills": [
                    {
                        "id": "html-css",
                        "title": "HTML & CSS",
                        "description": "Learn the building blocks of web pages",
                        "level": "beginner",
                        "estimatedTime": "3-4 weeks",
                        "prerequisites": [],
                        "resources": [
                            {
                                "type": "course",
                                "title": "HTML & CSS Fundamentals",
                                "url": "https://www.freecodecamp.org",
                                "description": "Free comprehensive course",
                            },
                        ],
                    },
                    {
                        "id": "javascript",
                        "title": "JavaScript",
                        "description": "Master the language of the web",
                        "level": "intermediate",
                        "estimatedTime": "6-8 weeks",
                        "prerequisites": ["HTML & CSS"],
                        "resources": [
                            {
                                "type": "course",
                                "title": "JavaScript Complete Course",
                                "url": "https://javascript.info",
                                "description": "Modern JavaScript tutorial",
                            },
                        ],
                    },
                ],
            },
        ],
    })
