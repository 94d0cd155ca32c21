"""
Career agent prompt templates.

One template per analysis type. Session facts are passed in as JSON
variables; the formatting instructions shape the narrative the client
renders.

Dependencies: langchain_core.prompts
System role: Prompt templates for career analyses, chat and resume building
"""

from langchain_core.prompts import ChatPromptTemplate

SYSTEM_PROMPT = """You are CareerValid AI, a career development assistant for software developers.
Give specific, practical and encouraging feedback grounded in the data you are given."""

INSIGHT_FOOTER = """
🔄 **Final Motivation**
[One motivational line]"""

GITHUB_ANALYSIS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Analyze this GitHub profile data and provide career insights:

Profile: {profile}
Repositories: {repositories}

Please provide insights in this exact format:

🧠 **Career Insights**
- Key Skills Detected: (list as inline code style)
- Activity Summary: (commit behavior, projects, patterns)
- Profile Strengths: (Frontend/Backend/Data Science/etc.)

💡 **AI Recommendations**
🔧 **Skills to Focus On**
• [specific recommendations]

🧪 **Suggested Projects**
• [project ideas based on current skills]

📚 **Learning Resources**
• [specific learning recommendations]

🚀 **Career Path Suggestions**
• [role recommendations]
""" + INSIGHT_FOOTER),
])

RESUME_ANALYSIS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Analyze this resume content and provide feedback:

File: {file_name}
Content: {content}

Please provide analysis in this exact format:

🧠 **Career Insights**
- Key Skills Detected: (list as inline code style)
- Experience Summary: (years, roles, industries)
- Resume Strengths: (what stands out)

💡 **AI Recommendations**
🔧 **Skills to Highlight**
• [skills to emphasize more]

📝 **Format Improvements**
• [specific formatting suggestions]

📚 **Content Enhancements**
• [what to add or modify]

🚀 **Role Alignment**
• [how well it matches target roles]

Provide a resume score from 1-100 written as "<score>/100" and explain the scoring.
""" + INSIGHT_FOOTER),
])

RESUME_SCORE_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Score this resume from 0 to 100 for overall quality, clarity, impact and ATS-friendliness.

File: {file_name}
Content: {content}"""),
])

PORTFOLIO_ANALYSIS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Analyze this portfolio website and provide feedback:

URL: {url}
Title: {title}
Description: {description}
Content Preview: {content_preview}...

Please provide analysis in this exact format:

🧠 **Career Insights**
- Personal Branding: (how well they present themselves)
- Technical Skills Shown: (evident from projects/content)
- Portfolio Strengths: (what works well)

💡 **AI Recommendations**
🎨 **Design Improvements**
• [UI/UX suggestions]

📝 **Content Enhancements**
• [what sections to add/improve]

🚀 **Professional Impact**
• [how to increase impact]

📱 **Technical Suggestions**
• [performance, accessibility, etc.]
""" + INSIGHT_FOOTER),
])

SKILLS_ANALYSIS_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Analyze these manually entered skills and provide insights:

Skills: {skills}

Please provide analysis in this exact format:

🧠 **Career Insights**
- Skill Categories: (frontend, backend, tools, etc.)
- Proficiency Overview: (strongest and weakest areas)
- Experience Level: (junior, mid, senior assessment)

💡 **AI Recommendations**
🔧 **Skills to Focus On**
• [skills to improve or learn next]

🧪 **Suggested Projects**
• [projects that would use these skills]

📚 **Learning Resources**
• [specific learning recommendations]

🚀 **Career Path Suggestions**
• [suitable roles based on skill mix]
""" + INSIGHT_FOOTER),
])

CHAT_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT + """

Provide helpful, actionable career advice. Keep responses concise but informative.
Focus on practical next steps, learning resources, and career guidance.
If the user asks about resume improvements, skill development, project ideas, or career paths,
use their session data to provide personalized recommendations.
Always end with encouragement and maintain a positive, supportive tone."""),
    ("human", """User's session context: {context}

User message: {message}"""),
])

RESUME_BUILDER_PROMPT = ChatPromptTemplate.from_messages([
    ("system", SYSTEM_PROMPT),
    ("human", """Create a professional resume for the target role: {target_role}

Contact Information:
{contact_info}

Professional Links:
{professional_links}

Available analyzed data:
{analyzed_data}

Additional sections provided by user:
Education: {education}
Certifications: {certifications}
Awards: {awards}
Languages: {languages}

Additional Info: {additional_info}

Generate a complete, professional resume in HTML format with:
1. Header with contact information and professional links
2. Professional Summary (3-4 lines highlighting key qualifications for {target_role})
3. Technical Skills (organized by category based on analyzed data)
4. Projects (from GitHub repositories if available)
5. Experience Summary (inferred from skills and project data)
6. Education (from provided data or inferred)
7. Certifications (if provided)
8. Awards (if provided)
9. Languages (if provided)

Use clean, professional HTML/CSS formatting. Make it ATS-friendly and well-structured.
Focus on achievements and impact, not just responsibilities."""),
])
