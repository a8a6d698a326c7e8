from app.models.schemas import DetailLevel

UNKNOWN_TITLE = "Unknown Title"
UNKNOWN_CHANNEL = "Unknown Channel"

TRANSCRIPT_EXCERPT_LIMIT = 4000

level_directives = {
    DetailLevel.BRIEF: "Provide a 2-3 sentence summary explaining what this video teaches.",
    DetailLevel.MEDIUM: (
        "Write a 2-3 paragraph summary covering main topics, what viewers learn, "
        "and who should watch."
    ),
    DetailLevel.DETAILED: (
        "Write a 4-5 paragraph comprehensive analysis including detailed concepts, "
        "takeaways, and target audience."
    ),
}

summary_template = """Analyze this YouTube video:

TITLE: "{title}"
CHANNEL: "{channel}"

{transcript_section}

{directive}

Be specific about content based on the title and transcript (if available). Write directly without preamble."""

fallback_templates = {
    DetailLevel.BRIEF: (
        '"{title}" by {channel} explains the topic in a clear, concise manner, '
        "covering the key concepts and providing valuable insights for viewers."
    ),
    DetailLevel.MEDIUM: (
        '"{title}" by {channel} provides comprehensive coverage of the subject. '
        "The video explores the main concepts, explains important details, and offers "
        "practical knowledge that viewers can apply. This content is valuable for anyone "
        "interested in learning more about this topic."
    ),
    DetailLevel.DETAILED: (
        '"{title}" is a detailed video by {channel} that thoroughly explores the subject '
        "matter. The content covers fundamental concepts, provides in-depth explanations, "
        "and offers practical insights that enhance understanding. The presentation is "
        "structured to progressively build knowledge, making it accessible for various "
        "skill levels. This video serves as a valuable resource for viewers seeking to "
        "deepen their expertise in this area."
    ),
}
