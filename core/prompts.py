# core/prompts.py
"""
Centralized prompt management for AI models.
Contains the prompts used to extract questions from images.
"""

# Gemini question extraction prompt
QUESTION_EXTRACTION_PROMPT = """
You are an expert exam digitizer. Read the attached image and extract EVERY multiple-choice question it contains, in the order they appear.

**OUTPUT RULES**
- Return ONLY raw JSON. Do not wrap it in markdown, do not use ```json fences, do not add any explanation before or after it.
- The JSON must be an array. Each element is one question object with exactly these keys:

[
  {
    "questionText": "The full question stem, exactly as written",
    "isExtraImageExist": "yes",
    "referenceText": "Passage, table or context the question refers to, or empty string",
    "solutionText": "A short explanation of why the correct option is right, or empty string",
    "options": [
      {"text": "Option text without its letter label", "isCorrect": false},
      {"text": "Option text without its letter label", "isCorrect": true}
    ]
  }
]

**FIELD RULES**
- "isExtraImageExist": write "yes" when the question depends on a diagram, chart or picture that cannot be written as text; otherwise write "" (empty string).
- "referenceText" and "solutionText": use "" when there is nothing to put there.
- "options": keep the original order. Mark EXACTLY ONE option with "isCorrect": true. If the image shows the answer, use it; otherwise solve the question yourself.
- Keep mathematical notation readable in plain text or LaTeX.
- If the image contains no questions, return [].
"""
