"""
Dossier section prompts.

One ChatPromptTemplate per section. The context is always passed as a
template variable, never formatted into the template text.

Dependencies: langchain_core.prompts
System role: Prompt templates for dossier writer behavior
"""

from langchain_core.prompts import ChatPromptTemplate

SUMMARY_INSTRUCTIONS = """## Instructions
- Create a fun, brief Wikipedia-style profile summary based on the provided information
- Limit your summary to one SHORT paragraph
- Make it engaging, like a Wikipedia intro but with personality
- Don't just walk through career history, that has its own section
- Talk about non-work aspects of their background when possible
- Include the most interesting facts about this person
- Stick to information that's actually in the provided data
- Write in the third person, as a single paragraph with no line breaks
- Do not use HTML, Markdown, or any other formatting syntax"""

ROAST_INSTRUCTIONS = """## Instructions
- Create a comedic, playful roast based on the provided information
- Open with a strong line that sets the tone
- Focus on details from the context that stand out as odd
- Avoid repeating the same joke or punchline
- Write in the third person (talking ABOUT them, not TO them)
- Don't just list career history
- Keep it to one short paragraph
- Do not use HTML, Markdown, or any other formatting syntax"""

PRAISE_INSTRUCTIONS = """## Instructions
- Write a short positive affirmation-style praise paragraph based on the provided information
- Call out specific details referenced in the context
- The tone should be warm and supportive without being cheesy
- Write in the third person (talking ABOUT them, not TO them)
- Keep it to one short paragraph
- Do not use HTML, Markdown, or any other formatting syntax"""

CAREER_INSTRUCTIONS = """## Instructions
- Extract professional information to create a career profile
- Identify 3-10 professional skills they have demonstrated (1-2 words each, specific and diverse)
- Create a timeline of 3-7 key positions or roles
- For each timeline entry give the title/role, the date range and a 1-2 sentence description
- Arrange timeline events in reverse chronological order (most recent first)
- Be specific and accurate, sticking to information found in the provided data"""

FUN_FACTS_INSTRUCTIONS = """## Instructions
- Find 3-5 interesting, unique, and lesser-known fun facts about this person
- Focus on surprising information about their life, background, hobbies, or lesser-known achievements
- Avoid basic career information or well-known facts, those are covered elsewhere
- Use a casual, engaging tone; each fact is one sentence that fits on one line
- Attribute each fact to the search result it came from (site title and URL) when possible
- Avoid cheesy language and minimize exclamation points"""


def _section_prompt(instructions: str) -> ChatPromptTemplate:
    return ChatPromptTemplate.from_messages([
        ("system", instructions),
        ("human", "{context}"),
    ])


SUMMARY_PROMPT = _section_prompt(SUMMARY_INSTRUCTIONS)
ROAST_PROMPT = _section_prompt(ROAST_INSTRUCTIONS)
PRAISE_PROMPT = _section_prompt(PRAISE_INSTRUCTIONS)
CAREER_PROMPT = _section_prompt(CAREER_INSTRUCTIONS)

FUN_FACTS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", FUN_FACTS_INSTRUCTIONS),
    ("human", """Profile Information:
{profile}

Search Results:
{search_results}"""),
])

TEXT_SECTION_PROMPTS: dict[str, ChatPromptTemplate] = {
    "summary": SUMMARY_PROMPT,
    "roast": ROAST_PROMPT,
    "praise": PRAISE_PROMPT,
}
