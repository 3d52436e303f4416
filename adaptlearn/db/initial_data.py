"""Catalogue de cours par défaut.

Used whenever the storage document has no ``courses`` section. The seed is
never written back to storage.
"""
from typing import List

from adaptlearn.schemas.course_schema import Course


DEFAULT_COURSES = [
    {
        "id": "js-basics",
        "title": "JavaScript Fundamentals",
        "description": "Learn the basics of JavaScript programming",
        "category": "Programming",
        "difficulty": "beginner",
        "duration": 120,
        "prerequisites": [],
        "tags": ["javascript", "programming", "web"],
        "modules": [
            {
                "id": "js-1",
                "title": "Variables and Data Types",
                "content": "Understanding JavaScript variables and basic data types",
                "type": "text",
                "duration": 30,
                "completed": False,
            },
            {
                "id": "js-2",
                "title": "Functions and Scope",
                "content": "Learn about JavaScript functions and variable scope",
                "type": "interactive",
                "duration": 45,
                "completed": False,
            },
        ],
    },
    {
        "id": "react-intro",
        "title": "Introduction to React",
        "description": "Build modern web applications with React",
        "category": "Web Development",
        "difficulty": "intermediate",
        "duration": 180,
        "prerequisites": ["js-basics"],
        "tags": ["react", "javascript", "frontend"],
        "modules": [
            {
                "id": "react-1",
                "title": "Components and JSX",
                "content": "Understanding React components and JSX syntax",
                "type": "video",
                "duration": 60,
                "completed": False,
            },
            {
                "id": "react-2",
                "title": "State and Props",
                "content": "Managing component state and passing props",
                "type": "interactive",
                "duration": 90,
                "completed": False,
            },
        ],
    },
    {
        "id": "ai-ml-basics",
        "title": "AI and Machine Learning Basics",
        "description": "Introduction to artificial intelligence and machine learning concepts",
        "category": "Data Science",
        "difficulty": "beginner",
        "duration": 240,
        "prerequisites": [],
        "tags": ["ai", "machine-learning", "data-science"],
        "modules": [
            {
                "id": "ai-1",
                "title": "What is AI?",
                "content": "Understanding artificial intelligence and its applications",
                "type": "text",
                "duration": 45,
                "completed": False,
            },
            {
                "id": "ai-2",
                "title": "Machine Learning Fundamentals",
                "content": "Basic concepts of machine learning algorithms",
                "type": "video",
                "duration": 75,
                "completed": False,
            },
        ],
    },
]


def get_default_courses() -> List[Course]:
    """Retourne une copie fraîche du catalogue par défaut."""
    return [Course.model_validate(course) for course in DEFAULT_COURSES]
