"""
Canned answer text, keyed by the branch that selects it.
"""

from typing import Dict, Tuple

from models.knowledge import Category

UNDERGRADUATE = "undergraduate"
GRADUATE = "graduate"
ENGINEERING = "engineering"
BUSINESS = "business"
OVERVIEW = "overview"
DEFAULT = "default"

# Knowledge-store answers, keyed by (category, variant).
RAG_TEMPLATES: Dict[Tuple[Category, str], str] = {
    (Category.REQUIREMENTS, UNDERGRADUATE): """For undergraduate admission, you'll need:

**Academic Requirements:**
• High school diploma with minimum 3.0 GPA
• Core curriculum completion (4 years English, 3 years Math, 3 years Science, 2 years Social Studies)

**Test Scores:**
• SAT: Minimum 1200 (recommended 1350+)
• ACT: Minimum 26 (recommended 30+)
• International students: TOEFL 80+ or IELTS 6.5+

**Application Materials:**
• Completed application form
• Official transcripts
• Two letters of recommendation
• Personal statement (500-750 words)
• Resume/Activity list
• $75 application fee

Some programs have additional requirements. Would you like details about a specific program?""",
    (Category.REQUIREMENTS, GRADUATE): """For graduate admission, you'll need:

**General Requirements:**
• Bachelor's degree from accredited institution
• Minimum undergraduate GPA of 3.2
• GRE/GMAT scores (varies by program)
• Statement of Purpose
• Three academic/professional references
• Resume/CV

**Program-Specific Highlights:**
• MBA: 2+ years work experience, GMAT 550+
• Engineering: Relevant undergraduate degree, GRE required
• Computer Science: Programming background preferred
• International students need TOEFL 100+ or IELTS 7.0+

Which graduate program interests you most?""",
    (Category.DEADLINES, GRADUATE): """**Graduate Application Deadlines:**
• Fall Semester: February 1, 2025
• Spring Semester: October 15, 2024
• Summer Semester: March 1, 2025
• International Students (Fall): January 15, 2025

**Financial Aid Deadlines:**
• FAFSA: March 1, 2025
• Scholarship Applications: January 31, 2025

Submit all materials by 11:59 PM EST on the deadline date.""",
    (Category.DEADLINES, UNDERGRADUATE): """**Undergraduate Application Deadlines:**
• Early Decision I: November 15, 2024
• Early Decision II: January 15, 2025
• Regular Decision: February 1, 2025
• Transfer Applications: March 15, 2025

**Financial Aid Deadlines:**
• FAFSA: March 1, 2025
• CSS Profile: February 15, 2025

International students should apply by January 15, 2025 for best consideration.""",
    (Category.FEES, GRADUATE): """**Graduate Program Costs (per year):**
• Master's Programs: $52,000
• Doctoral Programs: $55,000
• MBA Program: $65,000
• Law School: $58,000
• Medical School: $62,000

**Financial Aid Available:**
• Merit scholarships: $5,000-$25,000
• Need-based aid: Up to full tuition
• Graduate assistantships available
• Monthly payment plans offered

Would you like information about specific scholarship opportunities?""",
    (Category.FEES, UNDERGRADUATE): """**Undergraduate Costs (2024-2025):**
• Tuition: $45,000
• Room & Board: $12,000-$13,000
• Books & Supplies: $1,200
• Total Estimated Cost: $58,000-$60,000

**Financial Aid:**
• Merit scholarships: $5,000-$25,000
• Need-based aid available
• 94% of students receive some form of aid
• Full payment discount: 2%

The average financial aid package covers 65% of total costs.""",
    (Category.PROGRAMS, ENGINEERING): """**School of Engineering Programs:**
• Computer Science (BS, MS, PhD)
• Electrical Engineering (BS, MS, PhD)
• Mechanical Engineering (BS, MS, PhD)
• Civil Engineering (BS, MS, PhD)
• Biomedical Engineering (BS, MS, PhD)
• Data Science (BS, MS)

All engineering programs feature hands-on learning, industry partnerships, and excellent job placement rates (95%+).""",
    (Category.PROGRAMS, BUSINESS): """**School of Business Programs:**
• Business Administration (BBA, MBA, Executive MBA)
• Accounting (BS, MS)
• Finance (BS, MS)
• Marketing (BS, MS)
• International Business (BS, MS)
• Entrepreneurship (BS, Certificate)

Our business school is AACSB accredited with strong industry connections and internship opportunities.""",
    (Category.PROGRAMS, OVERVIEW): """We offer 230+ academic programs across multiple schools:
• Engineering & Technology
• Business & Management
• Liberal Arts & Sciences
• Medicine & Health Sciences
• Law and Legal Studies
• Education
• Natural Sciences

Which field interests you most? I can provide detailed information about specific programs.""",
    (Category.CAMPUS, DEFAULT): """**Campus Life Highlights:**
• 15 Residence Halls (4,500 bed capacity)
• 3 Dining Centers + 12 Cafés
• 200+ Student Organizations
• State-of-the-art Recreation Centers
• Comprehensive Support Services

**Student Support:**
• Academic Advising & Career Services
• Counseling & Health Services
• International Student Support
• Disability Services
• 24/7 Campus Security

95% of freshmen live on campus, creating a vibrant community experience. What aspect of campus life interests you most?""",
}

RAG_DEFAULT_RESPONSE = """I'd be happy to help you with information about college admissions! I can assist with:

• **Admission Requirements** - GPA, test scores, application materials
• **Application Deadlines** - Important dates and timelines
• **Tuition & Financial Aid** - Costs, scholarships, and payment options
• **Academic Programs** - Available majors and degree options
• **Campus Life** - Housing, activities, and support services

What specific aspect would you like to know more about?

*This response is powered by IBM Granite AI with Retrieval-Augmented Generation (RAG) technology.*"""

SUMMARY_PROMPT = "\n\nWould you like more specific information about any aspect?"

SOURCES_TRAILER = "\n\n*Sources: {sources}*"
LOW_CONFIDENCE_DISCLAIMER = (
    "\n\n*For more detailed information, please contact our admissions office directly.*"
)
APOLOGY_RESPONSE = (
    "I apologize, but I'm experiencing technical difficulties. Please try again or "
    "contact our admissions office for immediate assistance."
)

GREETING = (
    "Hello! I'm your College Admission Assistant powered by IBM Granite AI. I'm here "
    "to help you with admission requirements, application guidance, course selection, "
    "fees, and deadlines. How can I assist you today?"
)

# FAQ keyword responder.
FAQ_FOLLOW_UP = "{answer}\n\nIs there anything specific about {category} you'd like to know more about?"

FAQ_FALLBACKS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (
        ("deadline", "due date"),
        "Here are our key application deadlines:\n"
        "• Early Decision: November 15th\n"
        "• Regular Decision: February 1st\n"
        "• Late Applications: March 15th\n"
        "• International Students: January 15th\n\n"
        "Would you like more details about any specific deadline?",
    ),
    (
        ("fee", "cost", "tuition"),
        "Our tuition structure is:\n"
        "• Undergraduate: $45,000/year\n"
        "• Graduate: $52,000/year\n"
        "• Housing: $12,000/year\n"
        "• Meal Plan: $4,500/year\n\n"
        "Financial aid and scholarships are available. Would you like information "
        "about financial assistance options?",
    ),
    (
        ("program", "course", "major"),
        "We offer 150+ undergraduate and 80+ graduate programs across:\n"
        "• Engineering & Technology\n"
        "• Business & Management\n"
        "• Liberal Arts & Sciences\n"
        "• Computer Science\n"
        "• Medicine & Health Sciences\n"
        "• Law\n\n"
        "Which field interests you most?",
    ),
    (
        ("requirement", "eligibility"),
        "General admission requirements include:\n"
        "• High school diploma (3.0+ GPA)\n"
        "• Standardized test scores (SAT/ACT)\n"
        "• Letters of recommendation\n"
        "• Personal statement\n"
        "• Application form\n\n"
        "Specific programs may have additional requirements. Which program are you "
        "interested in?",
    ),
)

FAQ_HELP_RESPONSE = (
    "I'd be happy to help you with information about:\n"
    "• Admission requirements and eligibility\n"
    "• Application deadlines and process\n"
    "• Tuition fees and financial aid\n"
    "• Available programs and courses\n"
    "• Campus life and facilities\n\n"
    "What specific aspect would you like to know about?"
)

# Context-dispatch generator, keyed by (topic, variant).
GENERATION_TEMPLATES: Dict[Tuple[str, str], str] = {
    ("requirements", GRADUATE): (
        "Based on our admission data, graduate programs require a bachelor's degree "
        "with a minimum 3.2 GPA. Most programs require GRE scores, with competitive "
        "applicants scoring in the 80th percentile or higher. Professional programs "
        "like MBA require work experience, typically 2-5 years. International students "
        "need TOEFL 100+ or IELTS 7.0+. Strong letters of recommendation and a "
        "compelling statement of purpose significantly improve admission chances."
    ),
    ("requirements", UNDERGRADUATE): (
        "For undergraduate admission, successful applicants typically have a 3.5+ GPA "
        "and SAT scores above 1300. We require completion of core high school courses "
        "including 4 years of English, 3 years each of math and science, and 2 years "
        "of social studies. Strong extracurricular involvement and leadership "
        "experience enhance applications. International students need TOEFL 80+ or "
        "IELTS 6.5+. Early application is recommended for better scholarship "
        "consideration."
    ),
    ("deadlines", DEFAULT): (
        "Application deadlines are strategically set to allow comprehensive review. "
        "Early Decision (November 15) offers the best admission chances and merit "
        "scholarship consideration. Regular Decision (February 1) provides more time "
        "for application preparation. International students should apply by "
        "January 15 to ensure visa processing time. Financial aid applications "
        "(FAFSA) should be completed by March 1 for optimal aid consideration. Late "
        "applications are reviewed space-permitting after May 1."
    ),
    ("fees", DEFAULT): (
        "Our tuition structure reflects our commitment to educational excellence. "
        "Undergraduate tuition of $45,000 includes access to world-class faculty, "
        "research opportunities, and career services. Graduate programs range from "
        "$52,000-$65,000 depending on specialization. We offer substantial financial "
        "aid - 94% of students receive assistance averaging $28,000. Merit "
        "scholarships range from $5,000-$25,000 annually. Payment plans and "
        "work-study options help manage costs."
    ),
    ("programs", DEFAULT): (
        "Our 230+ academic programs are designed for career success. Engineering "
        "programs feature 95%+ job placement rates with industry partnerships at "
        "companies like Google, Microsoft, and Tesla. Business programs are AACSB "
        "accredited with strong alumni networks in Fortune 500 companies. Liberal "
        "arts programs emphasize critical thinking and communication skills valued "
        "by employers. Professional programs in medicine, law, and education maintain "
        "excellent board pass rates and career outcomes."
    ),
    ("general", DEFAULT): (
        "I'm here to provide comprehensive admission guidance using advanced AI "
        "capabilities. I can help with detailed information about requirements, "
        "deadlines, costs, programs, and campus life. My knowledge base is "
        "continuously updated with the latest admission policies and procedures. For "
        "complex situations or specific concerns, I can connect you with human "
        "admission counselors who specialize in your area of interest."
    ),
}
