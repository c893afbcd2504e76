from __future__ import annotations

from .models import (
    Award,
    Contact,
    ContactLink,
    Education,
    Experience,
    Portfolio,
    Profile,
    Project,
    QuickFact,
    SkillGroup,
)

PROFILE = Profile(
    name="Yash Singh",
    tagline="Creating Human-Centric AI for Real-World Impact",
    title="AI Engineer & Researcher",
    avatar="/yashpp.jpg",
    biography=(
        "is an Indian software engineer and artificial intelligence researcher currently "
        "pursuing a Bachelor of Engineering in Information Science and Engineering at "
        "B.M.S College of Engineering, Bengaluru. He is recognized for his contributions "
        "to AI-powered civic technology and emotion detection systems, with multiple "
        "hackathon victories and open-source contributions to the machine learning community."
    ),
    contact=Contact(
        location="Bengaluru, India",
        email="er.yshsingh@gmail.com",
        phone="+91 700 400 1927",
        links=(
            ContactLink(
                label="yash-github",
                href="https://github.com/include-yash",
                icon="github",
            ),
            ContactLink(
                label="yash-linkedin",
                href="https://www.linkedin.com/in/yash-singh-988aa525a/",
                icon="linkedin",
            ),
        ),
    ),
)

EXPERIENCE = (
    Experience(
        role="AI Intern",
        company="Next Oar",
        period="May 2025",
        summary=(
            "As an AI Intern at Next Oar, I developed a multi-layered relevance framework on "
            "top of vector databases to improve semantic retrieval precision in RAG systems. "
            "This involved designing relevance scoring logic that combines dense and sparse "
            "embeddings for context-aware results. I also contributed to the architecture of "
            "MCP (Model Control Protocol) servers, enabling modular, scalable deployment of AI "
            "services across distributed environments."
        ),
    ),
)

EDUCATION = (
    Education(
        qualification="Bachelor of Engineering",
        institution="B.M.S College of Engineering",
        period="Information Science and Engineering • Nov 2022 – Present",
        score="GPA: 9.45/10.0",
    ),
    Education(
        qualification="Higher Secondary Certificate",
        institution="DAV Public School, CBSE",
        period="2019 – 2021",
        score="Percentage: 94.4%",
    ),
    Education(
        qualification="Secondary School Certificate",
        institution="De Nobili School, CISCE",
        period="2019",
        score="Percentage: 94%",
    ),
)

PROJECTS = (
    Project(
        name="AI-Powered Civic Issue Mapper",
        description=(
            "A comprehensive multilingual data ingestion pipeline for real-time social media "
            "scraping and civic issue analysis. The system employs fine-tuned RoBERTa models "
            "for cross-lingual sentiment classification and integrates voice-based emotion "
            "detection. Features geospatial visualization using Folium with 2-level nested "
            "clustering (DBSCAN and K-Means) and a custom RAG pipeline for contextualized "
            "administrative summaries."
        ),
        tech=("Python", "RoBERTa", "DBSCAN", "K-Means", "RAG", "Folium"),
        url="https://vikasya-codehers.vercel.app/",
        link_label="civicIssue.app",
        badge_color="indigo",
    ),
    Project(
        name="VibeSense – AI-Driven Emotion Detection",
        description=(
            "An advanced emotion detection system utilizing custom LSTM networks trained on "
            "diverse Indian accent datasets. Features intelligent voice assistance with "
            "context-aware responses, RAG framework integration, and XTTS-based voice "
            "cloning. Built with Next.js and FastAPI, deployed on AWS with reverse proxy and "
            "dynamic DNS."
        ),
        tech=("LSTM", "Next.js", "FastAPI", "AWS", "XTTS", "RAG"),
        url="https://final-frontend-chi.vercel.app/",
        link_label="vibesense.app",
        badge_color="purple",
    ),
    Project(
        name="Quizzer – Smart Quiz Platform",
        description=(
            "A full-stack quiz system built with React and Flask REST API, featuring "
            "role-based dashboards, OTP authentication, and academic integrity monitoring "
            "through tab-switch detection. Includes intelligent question shuffling and "
            "dynamic leaderboards with CSV/PDF export capabilities."
        ),
        tech=("React", "Flask", "OTP Auth", "REST API", "PDF Export"),
        url="https://quizzer.site/",
        link_label="quizzer.site",
        badge_color="green",
    ),
)

AWARDS = (
    Award(
        rank="1st Place",
        event="AI Verse All-India Hackathon 2025",
        note="72-hour national AI challenge",
    ),
    Award(
        rank="1st Place",
        event="Impact 2.0 Hackathon by Augment AI 2025",
        note="24-hour social impact hackathon",
    ),
    Award(
        rank="1st Place",
        event="Rotech Hackathon by Rotract Club 2025",
        note="12-hour social impact hackathon",
    ),
    Award(
        rank="Global Contributor",
        event="First and only contributor on Kaggle to publish Indian Emotion Speech Dataset",
        note="Groundbreaking resource for emotion recognition",
        highlight="blue",
    ),
    Award(
        rank="Finalist",
        event="Techathon Gen AI Hackathon 2024",
        note="Generative AI expertise showcase",
        highlight="green",
    ),
)

SKILLS = (
    SkillGroup(
        name="Programming Languages",
        skills=("Java", "Python", "C++", "JavaScript", "SQL", "TypeScript"),
        badge_color="blue",
    ),
    SkillGroup(
        name="Web Technologies",
        skills=("React", "Next.js", "Tailwind CSS", "Flask", "REST APIs", "FastAPI"),
        badge_color="purple",
    ),
    SkillGroup(
        name="Tools & Databases",
        skills=("Git", "Docker", "MongoDB", "PostgreSQL", "Redis", "VS Code"),
        badge_color="green",
    ),
    SkillGroup(
        name="AI/ML",
        skills=("TensorFlow", "PyTorch", "Scikit-learn", "Wav2Vec2", "Transformers"),
        badge_color="orange",
    ),
)

QUICK_FACTS = (
    QuickFact(label="Current Role", value="AI Intern at Next Oar", highlight="blue"),
    QuickFact(label="Education", value="B.E. Student"),
    QuickFact(label="GPA", value="9.45/10.0", highlight="green"),
    QuickFact(label="Hackathon Wins", value="3 First Places", highlight="yellow"),
)

PORTFOLIO = Portfolio(
    profile=PROFILE,
    experience=EXPERIENCE,
    education=EDUCATION,
    projects=PROJECTS,
    awards=AWARDS,
    skills=SKILLS,
    quick_facts=QUICK_FACTS,
)
