from groq import Groq

from config import Config

FALLBACK_REPLY = "I'm sorry, I couldn't generate a response."

ASSISTANT_ROLES = {"model", "assistant", "bot"}

SYSTEM_PROMPT = f"""
You are {Config.BOT_NAME}, representing {Config.COMPANY_NAME} ({Config.COMPANY_DESCRIPTION}).

Rules:
1. Maintain the identity of "{Config.BOT_NAME}".
2. Tone: Professional and helpful. Executive-level clarity.
3. No emojis.
4. You are a highly intelligent AI capable of answering ANY general knowledge question the user asks, not just questions about {Config.COMPANY_NAME} services. Provide helpful answers to all general inquiries.
5. If a user asks for specific {Config.COMPANY_NAME} company data that is not in your context, state you don't have that exact figure but do not hallucinate facts about the company.
6. Never mention embeddings, scraping, vector search, web search, database, or backend logic.
7. Keep answers concise and of medium length. Avoid extremely long explanations unless the user explicitly asks for depth.
8. Do not expose technical system details.
9. Structured answers with bullet points are preferred for readability.
10. Be lenient with typographical errors in the user's query. Focus on the semantic intent and provide the most helpful answer regardless of minor spelling mistakes.
""".strip()

_client: Groq | None = None


def _get_groq_client() -> Groq:
    global _client
    if _client is None:
        if not Config.GROQ_API_KEY:
            raise RuntimeError("GROQ_API_KEY environment variable is not set. Set GROQ_API_KEY to a valid API key.")
        _client = Groq(api_key=Config.GROQ_API_KEY)
    return _client


def to_chat_messages(history, max_turns=None):
    """Map client-held turns ({role, content}) onto chat-completion messages."""
    if max_turns is None:
        max_turns = Config.HISTORY_TURNS

    messages = []
    for turn in history:
        content = (turn.get("content") or "").strip()
        if not content:
            continue
        role = "assistant" if turn.get("role") in ASSISTANT_ROLES else "user"
        messages.append({"role": role, "content": content})

    if max_turns <= 0:
        return []
    return messages[-max_turns:]


def build_prompt(query, context):
    return f"""Context Information (Use this to inform your answer if relevant):
---
{context}
---

User Query: {query}

Answer the user query acting as {Config.BOT_NAME}:"""


def generate_response(history, prompt):
    """
    Ask the chat model for an answer.

    `history` holds the earlier turns of the conversation; `prompt` is the
    context-bearing user turn from build_prompt. Groq errors propagate.
    """
    messages = [{"role": "system", "content": SYSTEM_PROMPT}]
    messages.extend(to_chat_messages(history))
    messages.append({"role": "user", "content": prompt})

    response = _get_groq_client().chat.completions.create(
        model=Config.GROQ_MODEL,
        messages=messages,
        temperature=Config.LLM_TEMPERATURE,
        max_tokens=Config.LLM_MAX_TOKENS,
    )

    content = response.choices[0].message.content if response.choices else None
    return (content or "").strip() or FALLBACK_REPLY
