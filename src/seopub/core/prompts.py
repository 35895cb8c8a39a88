"""Prompt templates for the LLM-backed steps"""

METADATA_EXCERPT_CHARS = 2000
CATEGORY_EXCERPT_CHARS = 500


METADATA_PROMPT = """\
Analyse this article and produce a JSON object with the following SEO metadata:
- description: an SEO-optimised description of 150-160 characters
- tags: an array of 3-5 relevant tags
- keywords: an array of 5-10 relevant keywords
- author: the author, if the article names one
- seoTitle: an SEO-optimised title

Article:
Title: {title}
Content: {excerpt}

Reply ONLY with valid JSON, no additional text."""


CONTENT_PROMPT = """\
You are an expert in restructuring article content for SEO. Rewrite this article as SEO-optimised Markdown.

RULES:

1. HIERARCHY
   - Use h2 (##) headings for main sections and h3 (###) for subsections
   - Build a logical hierarchy even when the source text has none
   - Headings must be descriptive; never reuse the article title as the first h2

2. CODE
   - Fenced code blocks (```) with the right language tag (```javascript, ```python, ...)
   - Inline code in single backticks

3. CLEANUP
   - Remove metadata mixed into the text (dates, tags, reading time, "min read", ...)
   - Remove navigation and menu items
   - Remove translation notices and social sharing prompts

4. FORMATTING
   - Paragraphs separated by a blank line
   - Bulleted (-) or numbered (1.) lists where they help scanning
   - Important keywords in **bold** when relevant

Keep every important piece of information and do not change the meaning, only the structure and formatting.

Title: {title}
Raw content: {content}

Return ONLY the structured Markdown: no frontmatter, no explanations, no comments."""


COMBINED_PROMPT = """\
You are an SEO content-marketing expert. Turn this article into SEO-optimised Markdown and produce its metadata.

STEP 1 - Structured Markdown:
- Use h2 (##) and h3 (###) headings to build a semantic hierarchy
- Only open with an h2 when it adds value; never use generic headings such as "Introduction" or "Overview"
- Never reuse the original title as the first h2
- Fenced code blocks with a language tag; inline code in single backticks
- Remove metadata mixed into the text, navigation items, translation notices and social sharing prompts
- Paragraphs separated by a blank line; lists where they help scanning
- Return only the real content, no demonstration examples

STEP 2 - SEO metadata, in the SAME language as the content:
- translatedTitle: the original title translated into the language of the content
- description: 150-160 characters, engaging and search-optimised
- seoTitle: an SEO-optimised title

Article:
Original title: {title}
Content: {content}

Reply in this EXACT format:
===CONTENT===
{{Structured Markdown only, no frontmatter, no explanations}}
===METADATA===
{{
  "translatedTitle": "...",
  "description": "...",
  "seoTitle": "..."
}}
===END==="""


BLOCK_CONTENT_PROMPT = """\
You convert Markdown into Sanity Portable Text (BlockContent).

The result is a JSON array whose items are one of:
1. Text blocks (_type: "block") with:
   - _key: unique identifier ("block1", "block2", ...)
   - style: "normal" | "h1" | "h2" | "h3" | "h4" | "blockquote"
   - listItem: "bullet" (optional, for list items)
   - children: array of spans {{"_type": "span", "text": "...", "marks": [...]}}
   - markDefs: (optional) link definitions {{"_key": "link1", "_type": "link", "href": "https://..."}}
2. Code blocks (_type: "code") with _key, code and an optional language
3. Images (_type: "mainImage") with _key, asset {{"_type": "reference", "_ref": "image-id"}}, optional caption and alt
4. YouTube embeds (_type: "youtube") with _key and url

RULES:
- Every item MUST have a unique _key
- Links: add a markDef with a unique _key and reference that key in the span marks
- Marks are "strong", "em", "code" or a link key
- Bullet list items use listItem: "bullet"; quotes use style: "blockquote"
- Headings use style "h1" to "h4" according to their level
- Fenced code becomes a "code" item, with the language when known

EXAMPLE:
[
  {{"_type": "block", "_key": "block1", "style": "h2",
    "children": [{{"_type": "span", "text": "Section title", "marks": []}}]}},
  {{"_type": "block", "_key": "block2", "style": "normal",
    "children": [
      {{"_type": "span", "text": "Plain text with ", "marks": []}},
      {{"_type": "span", "text": "a link", "marks": ["link1"]}}
    ],
    "markDefs": [{{"_key": "link1", "_type": "link", "href": "https://example.com"}}]}},
  {{"_type": "code", "_key": "code1", "code": "const x = 42;", "language": "javascript"}}
]

Markdown to convert:

{markdown}

Return ONLY the raw JSON array: no explanations, no Markdown, no code fences."""


CATEGORY_PROMPT = """\
You are a content classification expert.

Pick the most appropriate category for this content from the list below.

TITLE: {title}
DESCRIPTION: {description}
CONTENT (excerpt): {excerpt}...

AVAILABLE CATEGORIES:
{categories}

Reply ONLY with the chosen category ID (the _id value), with no explanation or extra text.

If no category really fits, choose the first one in the list."""
