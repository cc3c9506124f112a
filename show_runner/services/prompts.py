"""Prompt templates for show notes generation."""

TRUNCATION_MARKER = "... [truncated for length if needed]"


def show_notes_prompt(transcript: str, show_name: str, max_chars: int) -> str:
    """Build the show notes prompt for an episode transcript.

    Args:
        transcript: Full transcript text
        show_name: Podcast name used in the instructions
        max_chars: Maximum number of transcript characters to embed

    Returns:
        Prompt string
    """
    excerpt = transcript[:max_chars]
    return (
        "You are an expert podcast producer. "
        f'Analyze the following transcript for the "{show_name}" podcast.\n\n'
        "Transcript:\n"
        f"{excerpt} {TRUNCATION_MARKER}\n\n"
        "Please generate the following outputs:\n\n"
        "1. **Hashtags**: Create 5-10 relevant hashtags. Format: #tag1, #tag2.\n"
        "2. **Clip Candidates**: Find 5-7 engaging clips (15-90s). For each, provide:\n"
        "   - Timestamp (approximate)\n"
        "   - Hook (The engaging line)\n"
        "   - Rationale (Why this clip works)\n"
        "3. **Show Notes**:\n"
        "   - YouTube Title (Catchy, SEO-optimized)\n"
        "   - YouTube Description (Summary + Key Takeaways)\n"
        "   - Transistor Show Notes (Brief summary for audio feed)\n"
    )
