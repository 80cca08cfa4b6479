"""Application-wide constants."""

# ---------------------------------------------------------------------------
# Gemini
# ---------------------------------------------------------------------------
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"

# ---------------------------------------------------------------------------
# Summarization
# ---------------------------------------------------------------------------
SUMMARY_PROMPT_TEMPLATE = (
    "Summarize the article at this URL: {input}. "
    "Provide the summary in markdown format with the following structure:\n"
    "\n"
    "# {{insert article name here}}\n"
    "## Key Points\n"
    "- Point 1\n"
    "- Point 2\n"
    "- Point 3\n"
    "## Main Ideas\n"
    "1. First main idea\n"
    "2. Second main idea\n"
    "3. Third main idea\n"
    "\n"
    "## Conclusion"
)

SUMMARY_ERROR_MESSAGE = "An error occurred while summarizing the article."
