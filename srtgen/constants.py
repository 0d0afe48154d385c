"""All magic values live here — no inline literals anywhere else."""

# Environment variables
ENV_API_KEY = "API_KEY"
ENV_BACKEND = "SRT_BACKEND"
ENV_MODEL = "SRT_MODEL"
ENV_LOG_LEVEL = "LOG_LEVEL"

# Inference backends
BACKEND_GEMINI = "gemini"
BACKEND_OPENAI = "openai"
DEFAULT_BACKEND = BACKEND_GEMINI
DEFAULT_LOG_LEVEL = "INFO"
GEMINI_MODEL = "gemini-2.5-pro"
OPENAI_AUDIO_MODEL = "gpt-4o-audio-preview"
DEFAULT_MODELS = {
    BACKEND_GEMINI: GEMINI_MODEL,
    BACKEND_OPENAI: OPENAI_AUDIO_MODEL,
}

# OpenAI only accepts these audio container formats for input_audio.
OPENAI_AUDIO_FORMATS = {
    "audio/mpeg": "mp3",
    "audio/mp3": "mp3",
    "audio/wav": "wav",
    "audio/x-wav": "wav",
    "audio/wave": "wav",
}

# Audio encoding
DATA_URL_TEMPLATE = "data:{mime_type};base64,{data}"
DEFAULT_MIME_TYPE = "application/octet-stream"

# CLI
DEFAULT_LANGUAGE = "English"

# Errors — the rendered strings are part of the public string contract.
MSG_API_KEY_MISSING = "API_KEY environment variable not set."
MSG_UNKNOWN_BACKEND = "Unknown SRT_BACKEND: %r (expected one of: %s)"
MSG_ERROR_PREFIX = "An error occurred: "
MSG_UNKNOWN_ERROR = "產生字幕時發生未知錯誤。"
MSG_READ_FAILED = "Failed to read audio file %s: %s"
MSG_NOT_DATA_URL = "expected textual data-URL encoding, got other representation"
MSG_EMPTY_RESPONSE = "Model returned no text"
MSG_UNSUPPORTED_AUDIO = "Unsupported audio type for %s: %s"

# Log messages
MSG_ENCODED = "Encoded %s (%s, %d base64 chars)"
MSG_REQUESTING = "→ %s (%s) language=%s"
MSG_GENERATED = "✓ Subtitles generated (%.1fs, %d chars)"
MSG_GENERATION_FAILED = "Error generating subtitles [%s]: %s"
MSG_WROTE_OUTPUT = "Wrote %s"

# Prompting
SYSTEM_INSTRUCTION = (
    "You are an expert AI for generating SRT subtitles from audio. "
    "Your output MUST be ONLY the raw SRT content in the requested language. "
    "Do not add any explanation or formatting like markdown code blocks."
)

PROMPT_TEMPLATE = """
Please transcribe the provided audio and generate a subtitle file in SRT format. Adhere strictly to the following rules:

1. **SRT Structure:**
    - Each entry must have a sequence number, a timestamp, and subtitle text.
    - Separate each entry with a single blank line.

2. **Sequence Number:**
    - Start with 1 and increment by 1 for each entry.

3. **Timestamp:**
    - Use the EXACT format: `hh:mm:ss,xxx` (e.g., 00:01:05,009).
    - The hours part (hh) is mandatory, even if it's 00.
    - Use ` --> ` to separate start and end times.

4. **Subtitle Text:**
    - **CRITICAL:** The text for each entry MUST be a single line.
    - Keep subtitle lines to a reasonable length for optimal readability.
    - Break longer sentences into multiple, sequential SRT entries at natural semantic pauses.
    - Remove all punctuation (commas, periods, question marks, etc.).
    - Remove filler words (e.g., um, ah, uh) and stutters.
    - The language of the subtitles must be {language}.

5. **Timing:**
    - Each subtitle entry should be visible for 3 to 5 seconds. Adjust timing based on the spoken pace.
"""
