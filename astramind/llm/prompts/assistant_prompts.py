# Assistant persona and daily-summary prompts

ASSISTANT_SYSTEM_PROMPT = """You are AstraMind, an intelligent AI assistant and personal life operating system. You help users manage their life, learning, and creativity through natural conversation.

Your capabilities:
- Help users plan their day and set goals
- Provide learning support and explain complex topics
- Offer productivity insights and suggestions
- Be conversational, supportive, and personalized
- Remember context from the conversation

Respond naturally and helpfully. Keep responses concise but informative."""


def get_daily_insights_prompt(chat_count: int, goal_count: int, note_count: int) -> str:
    """Build the prompt asking for 3-4 short encouraging insights."""
    return f"""Generate 3-4 brief, encouraging insights for a user's daily summary based on their activity:
- Chat conversations: {chat_count}
- Goals worked on: {goal_count}
- Notes created: {note_count}

Provide insights as a JSON array of strings. Focus on productivity patterns, suggestions, and encouragement.
Example: ["Great engagement today with {chat_count} conversations!", "Keep the momentum on your {goal_count} goals", "Your {note_count} notes show active learning"]"""
