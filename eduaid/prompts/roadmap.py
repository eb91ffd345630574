"""Study roadmap prompt template."""

ROADMAP_USER_PROMPT = (
    "I want to {goal}. My current level is {level}. "
    "Please give me a structured study roadmap with milestones, resources, and exercises."
)
