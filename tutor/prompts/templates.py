"""Tutor Templates - Prompts e schemas de resposta do servico de raciocinio."""

# =============================================================================
# SYSTEM PROMPTS
# =============================================================================

TUTOR_SYSTEM_PROMPT = """You are a patient and knowledgeable tutor. Explain concepts clearly for a student."""

JSON_SYSTEM_PROMPT = """You are a quiz generation and grading service. Respond ONLY with valid JSON that matches the requested schema, with no additional text."""

# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

QUIZ_RESPONSE_SCHEMA = {
    "type": "object",
    "properties": {
        "title": {"type": "string"},
        "questions": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "questionText": {"type": "string"},
                    "questionType": {"type": "string", "enum": ["multiple-choice", "theory"]},
                    "options": {"type": "array", "items": {"type": "string"}},
                    "correctAnswer": {"type": "string"},
                },
                "required": ["questionText", "questionType", "correctAnswer"],
            },
        },
    },
    "required": ["title", "questions"],
}

THEORY_GRADING_SCHEMA = {
    "type": "object",
    "properties": {
        "results": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "isCorrect": {"type": "boolean"},
                    "feedback": {"type": "string"},
                },
                "required": ["isCorrect", "feedback"],
            },
        },
    },
    "required": ["results"],
}

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

EXPLAIN_TOPIC_PROMPT = """Provide a detailed explanation of the following topic, suitable for a student. Be clear, concise, and well-structured. Topic: "{topic}\""""


QUIZ_GENERATION_PROMPT = """Based on the following content, generate a comprehensive quiz for a student named {student_name}.
The quiz must contain exactly two types of questions:
1.  {mc_count} multiple-choice questions.
2.  {theory_count} theory-based (open-ended) questions.

Mix the questions together throughout the quiz.

Content:
---
{content}
---

Return the quiz in JSON format. The JSON object should have a "title" (string) and a "questions" (array of objects).
Each question object must have:
- "questionText" (string)
- "questionType" (string: either "multiple-choice" or "theory")
- "correctAnswer" (string: for theory, this is the ideal answer; for multiple-choice, it must be one of the options, copied verbatim)
- "options" (an array of 4 strings, ONLY for "multiple-choice" questions)

JSON SCHEMA:
{schema}

Return the JSON now:"""


THEORY_GRADING_PROMPT = """A student's theory-based answers need to be graded. For each question, compare the user's answer to the ideal answer and provide a boolean "isCorrect" and brief "feedback". "isCorrect" should be true if the user's answer captures the main points of the ideal answer, even if worded differently. The feedback should explain why the answer was right or wrong.

Here are the {count} answers to grade:
{answers}

Return a single JSON object with a key "results", an array of EXACTLY {count} objects.
The results MUST be in the same order as the answers above: result 1 grades answer 1, result 2 grades answer 2, and so on.
Each object must contain:
- "isCorrect" (boolean)
- "feedback" (string)

JSON SCHEMA:
{schema}

Return the JSON now:"""


FEEDBACK_PROMPT = """A student named {student_name} has just completed a quiz on "{quiz_title}".
Here are their results:
- Score: {score} out of {total}
- Their answers:
{answer_lines}

Please provide some brief, encouraging, and constructive feedback for {student_name}. Highlight what they did well and suggest areas for improvement based on their incorrect answers. Keep it friendly and positive."""


FEEDBACK_ANSWER_LINE = """  - Question: "{question}"
    - Their answer: "{selected}" ({verdict})"""
