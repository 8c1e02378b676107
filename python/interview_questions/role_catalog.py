"""
Catalog of example role titles for autocomplete.
"""

from __future__ import annotations

from typing import Final


COMMON_ROLES: Final[tuple[str, ...]] = (
    # Frontend
    "Senior Frontend Engineer at FAANG",
    "Senior React Engineer at Series B Startup",
    "Senior Vue.js Engineer at Startup",
    "Senior Angular Developer at Enterprise",
    "Frontend Architect at Large Company",
    "Senior Next.js Developer at Startup",
    "Senior TypeScript Developer at SaaS Company",
    "Senior JavaScript Engineer at Media Company",
    # Backend
    "Senior Backend Engineer at FAANG",
    "Senior Node.js Engineer at Series B Startup",
    "Senior Python Engineer at Tech Company",
    "Senior Java Engineer at Enterprise",
    "Senior Go Engineer at Cloud Company",
    "API Engineer at Platform Company",
    "Senior Ruby on Rails Engineer at SaaS Company",
    "Senior .NET Engineer at Enterprise",
    "Senior Django Developer at Startup",
    "Senior FastAPI Developer at Tech Company",
    # Full stack
    "Senior Full Stack Engineer at Startup",
    "Full Stack Developer at Series A Startup",
    "Senior MERN Stack Engineer at Startup",
    "Senior JAMstack Developer at Modern Company",
    # Mobile
    "Senior Mobile Engineer (iOS/Android) at Tech Company",
    "Senior iOS Engineer at FAANG",
    "Senior Android Engineer at FAANG",
    "React Native Developer at Startup",
    "Flutter Developer at Mobile First Company",
    "Senior Kotlin Developer at Android-First Startup",
    # Data & ML
    "Senior Data Engineer at FAANG",
    "Data Scientist at Tech Company",
    "Data Analyst at Business Intelligence Company",
    "Analytics Engineer at SaaS Company",
    "Senior ML Engineer at Tech Company",
    "Machine Learning Engineer at AI Startup",
    "MLOps Engineer at AI Company",
    "NLP Engineer at Language Tech Startup",
    "Computer Vision Engineer at Robotics Company",
    # DevOps & security
    "DevOps Engineer at Cloud Company",
    "Site Reliability Engineer at High-Traffic Platform",
    "Platform Engineer at Tech Company",
    "Senior Cloud Engineer at AWS/Azure/GCP",
    "Senior Security Engineer at FAANG",
    "Cloud Security Engineer at Enterprise",
    "Application Security Engineer at SaaS Company",
    "Penetration Tester at Security Consultancy",
    # Product, program & design
    "Senior Product Manager at FAANG",
    "Group Product Manager at Large Tech Company",
    "Associate Product Manager at Tech Company",
    "Technical Product Manager at Tech Company",
    "Product Owner at Agile Company",
    "Senior Technical Program Manager at FAANG",
    "Project Manager at Construction Company",
    "Scrum Master at Software Company",
    "Product Designer at Tech Company",
    "UX Designer at Digital Agency",
    "UI Designer at Startup",
    "UX Researcher at Consumer App",
    "Interaction Designer at Product Company",
    # Engineering leadership
    "Tech Lead at Series A Startup",
    "Staff Engineer at Tech Company",
    "Principal Engineer at Large Tech Company",
    "Senior Engineering Manager at FAANG",
    "Director of Engineering at Scale-up",
    "VP of Engineering at Series C Company",
    "CTO at Early Stage Startup",
    # Sales & business development
    "Account Executive at SaaS Company",
    "Strategic Account Executive at Enterprise",
    "Sales Development Representative at Startup",
    "Business Development Representative at Startup",
    "Senior Sales Manager at Enterprise",
    "Account Manager at Agency",
    "Sales Engineer at Software Company",
    # Marketing
    "Digital Marketing Manager at E-commerce",
    "Content Marketing Manager at Startup",
    "Growth Marketing Manager at Consumer App",
    "SEO Specialist at E-commerce",
    "Brand Manager at Consumer Goods Company",
    "Social Media Manager at Brand",
    "Product Marketing Manager at Tech Company",
    # Finance
    "Financial Analyst at Investment Bank",
    "Senior Accountant at Accounting Firm",
    "Finance Manager at Mid-Size Company",
    "Controller at Manufacturing Company",
    "Budget Analyst at Corporation",
    "Treasury Analyst at Financial Services",
    # People
    "HR Manager at Mid-Size Company",
    "HR Business Partner at Corporation",
    "Technical Recruiter at Tech Company",
    "Talent Acquisition Specialist at Enterprise",
    "People Operations Manager at Startup",
    # Operations
    "Operations Manager at Logistics Company",
    "Supply Chain Analyst at Manufacturing",
    "Logistics Coordinator at Distribution Center",
    "Procurement Specialist at Enterprise",
    "Warehouse Supervisor at E-commerce",
    "Inventory Manager at Retail Chain",
    # Customer service
    "Customer Service Representative at Call Center",
    "Customer Support Specialist at SaaS",
    "Customer Success Manager at Software Company",
    "Help Desk Technician at University",
    # Healthcare
    "Registered Nurse at Hospital",
    "Physician at Medical Center",
    "Physical Therapist at Rehabilitation Clinic",
    "Pharmacist at Retail Pharmacy",
    "Clinical Research Coordinator at Research Hospital",
    "Healthcare Administrator at Hospital",
    # Education
    "Elementary School Teacher at Private School",
    "High School Math Teacher at Public School",
    "University Professor at Research University",
    "Corporate Trainer at Enterprise",
    "Instructional Designer at EdTech Company",
    "School Principal at K-12 School",
    # Legal
    "Senior Attorney at Law Firm",
    "Corporate Lawyer at Law Firm",
    "In-House Counsel at Company",
    "Paralegal at Law Firm",
    "Compliance Officer at Bank",
    # Creative
    "Graphic Designer at Creative Agency",
    "Art Director at Ad Agency",
    "Copywriter at Marketing Agency",
    "Illustrator at Creative Studio",
    "Photographer at Media Company",
    "Video Editor at Production Studio",
    # Hospitality
    "Hotel General Manager at Resort",
    "Restaurant Manager at Fine Dining Restaurant",
    "Chef at Fine Dining Restaurant",
    "Front Desk Agent at Hotel",
    "Banquet Manager at Convention Center",
    # Retail
    "Store Manager at Retail Chain",
    "Retail Associate at Department Store",
    "Visual Merchandiser at Fashion Brand",
    "Cashier at Grocery Store",
    # Consulting
    "Management Consultant at Consulting Firm",
    "Strategy Consultant at Strategy Firm",
    "IT Consultant at Tech Consulting",
    "Principal Consultant at Consulting Firm",
    # Other
    "Software Engineer at Tech Company",
    "QA Engineer at Software Company",
    "Game Developer at Gaming Studio",
    "Firmware Engineer at Hardware Company",
    "Mechanical Engineer at Manufacturing",
    "Civil Engineer at Construction Firm",
    "Policy Analyst at Government Agency",
    "Executive Assistant at Corporation",
    "Pilot at Commercial Airline",
    "Electrician at Construction Company",
)


def suggest_roles(query: str | None, limit: int = 8) -> list[str]:
    """
    Suggest catalog roles for an autocomplete box.

    Titles starting with the query come first, then titles containing it
    anywhere; both groups keep catalog order. An empty query returns the
    head of the catalog.
    """
    if limit <= 0:
        return []

    needle = (query or "").strip().lower()
    if not needle:
        return list(COMMON_ROLES[:limit])

    prefix_matches: list[str] = []
    substring_matches: list[str] = []
    for role in COMMON_ROLES:
        lowered = role.lower()
        if lowered.startswith(needle):
            prefix_matches.append(role)
        elif needle in lowered:
            substring_matches.append(role)

    return (prefix_matches + substring_matches)[:limit]
