"""
Demo content for local development.

Each function returns fresh documents whose timestamps are relative to
``now`` (epoch milliseconds), so a seeded store always looks recent.
"""

from typing import Any, Dict, List

from agency_site_api.app.core.db import DAY_MS

HOUR_MS = 60 * 60 * 1000


def service_fixtures(now: int) -> List[Dict[str, Any]]:
    common = {"is_active": True, "created_at": now, "updated_at": now}
    return [
        {
            "title": "AI & Machine Learning",
            "description": (
                "Revolutionary AI solutions that transform businesses through intelligent automation, "
                "predictive analytics, and cutting-edge machine learning models."
            ),
            "icon": "brain",
            "category": "ai-ml",
            "features": [
                "Custom AI Model Development",
                "Natural Language Processing",
                "Computer Vision & Image Recognition",
                "Predictive Analytics & Forecasting",
                "Intelligent Process Automation",
                "AI-Powered Chatbots & Assistants",
                "Deep Learning with TensorFlow/PyTorch",
                "MLOps & Model Deployment",
            ],
            "sort_order": 1,
            **common,
        },
        {
            "title": "Digital Media Design",
            "description": (
                "Stunning visual experiences that captivate audiences. From brand identity to interactive "
                "digital experiences that leave lasting impressions."
            ),
            "icon": "palette",
            "category": "design",
            "features": [
                "Brand Identity & Logo Design",
                "Motion Graphics & Animation",
                "Interactive Web Experiences",
                "Video Production & Editing",
                "3D Modeling & Visualization",
                "Social Media Creative Assets",
                "UI/UX Design Excellence",
                "Print & Digital Media Integration",
            ],
            "sort_order": 2,
            **common,
        },
        {
            "title": "Software Development",
            "description": (
                "End-to-end software solutions built with modern architectures. From web applications to "
                "mobile apps and enterprise systems."
            ),
            "icon": "code",
            "category": "development",
            "features": [
                "Full-Stack Web Development",
                "Mobile App Development (iOS/Android)",
                "Cloud-Native Architecture",
                "Microservices & API Development",
                "DevOps & CI/CD Automation",
                "Database Design & Optimization",
                "Real-Time Systems & WebSockets",
                "Enterprise Software Solutions",
            ],
            "sort_order": 3,
            **common,
        },
    ]


def _project(
    now: int,
    sort_order: int,
    title: str,
    description: str,
    short_description: str,
    slug: str,
    thumb: str,
    technologies: List[str],
    category: str,
    created_days_ago: int,
    *,
    status: str = "completed",
    featured: bool = False,
    client_name: str = None,
    completed_days_ago: int = None,
    project_url: str = None,
    github_url: str = None,
) -> Dict[str, Any]:
    return {
        "title": title,
        "description": description,
        "short_description": short_description,
        "image_url": f"/images/projects/{slug}.jpg",
        "thumbnail_url": f"/images/projects/thumbs/{thumb}-thumb.jpg",
        "project_url": project_url,
        "github_url": github_url,
        "technologies": technologies,
        "category": category,
        "status": status,
        "featured": featured,
        "client_name": client_name,
        "completed_at": now - completed_days_ago * DAY_MS if completed_days_ago is not None else None,
        "sort_order": sort_order,
        "is_public": True,
        "created_at": now - created_days_ago * DAY_MS,
        "updated_at": now,
    }


def project_fixtures(now: int) -> List[Dict[str, Any]]:
    return [
        _project(
            now, 1, "E-commerce Platform",
            "A complete e-commerce solution built with Next.js and Stripe integration. Features include "
            "product catalog, shopping cart, payment processing, and admin dashboard.",
            "Modern e-commerce platform with payment integration",
            "ecommerce-platform", "ecommerce",
            ["Next.js", "TypeScript", "Stripe", "Tailwind CSS", "PostgreSQL"], "web-app", 60,
            featured=True, client_name="TechCorp Inc", completed_days_ago=30,
            project_url="https://demo-ecommerce.veritron.com",
            github_url="https://github.com/veritron/ecommerce-platform",
        ),
        _project(
            now, 2, "Task Management App",
            "A collaborative task management application with real-time updates, team collaboration, and "
            "project tracking. Built with React and Firebase.",
            "Collaborative task management with real-time sync",
            "task-manager", "task",
            ["React", "Firebase", "Material-UI", "TypeScript"], "web-app", 45,
            featured=True, client_name="StartupXYZ", completed_days_ago=15,
            project_url="https://tasks.veritron.com",
            github_url="https://github.com/veritron/task-manager",
        ),
        _project(
            now, 3, "Fitness Tracking Mobile App",
            "Cross-platform mobile application for fitness tracking with workout plans, progress tracking, "
            "and social features. Built with React Native.",
            "Cross-platform fitness tracking app",
            "fitness-app", "fitness",
            ["React Native", "Node.js", "MongoDB", "Express"], "mobile-app", 90,
            client_name="FitLife LLC", completed_days_ago=60,
            project_url="https://apps.apple.com/app/fittrack",
        ),
        _project(
            now, 4, "AI Content Generator",
            "An AI-powered content generation platform using GPT models. Features include blog post "
            "generation, social media content, and SEO optimization.",
            "AI-powered content generation platform",
            "ai-content", "ai",
            ["Python", "OpenAI API", "FastAPI", "React", "PostgreSQL"], "ai-ml", 30,
            featured=True, client_name="ContentPro Agency", completed_days_ago=7,
            project_url="https://ai-content.veritron.com",
            github_url="https://github.com/veritron/ai-content-generator",
        ),
        _project(
            now, 5, "Veritron Design System",
            "A comprehensive design system with reusable components, design tokens, and documentation. "
            "Built for scalable design across multiple products.",
            "Comprehensive design system with reusable components",
            "design-system", "design",
            ["React", "Storybook", "TypeScript", "Tailwind CSS", "Figma"], "design-system", 14,
            status="in-progress",
            project_url="https://design.veritron.com",
            github_url="https://github.com/veritron/design-system",
        ),
        _project(
            now, 6, "Real Estate API",
            "RESTful API for real estate listings with search, filtering, and geolocation features. "
            "Includes comprehensive documentation and rate limiting.",
            "RESTful API for real estate listings",
            "realestate-api", "api",
            ["Node.js", "Express", "MongoDB", "Redis", "Docker"], "api", 75,
            client_name="PropertyTech Solutions", completed_days_ago=45,
            github_url="https://github.com/veritron/realestate-api",
        ),
        _project(
            now, 7, "DevOps Automation Suite",
            "Automated deployment and monitoring suite with Docker, Kubernetes, and CI/CD pipeline "
            "integration. Reduces deployment time by 80%.",
            "DevOps automation with CI/CD integration",
            "devops-suite", "devops",
            ["Docker", "Kubernetes", "Jenkins", "Terraform", "AWS"], "automation", 50,
            client_name="TechScale Corp", completed_days_ago=20,
            github_url="https://github.com/veritron/devops-automation",
        ),
        _project(
            now, 8, "Data Visualization Dashboard",
            "Interactive dashboard for business intelligence with real-time data visualization, custom "
            "charts, and export capabilities.",
            "Interactive business intelligence dashboard",
            "data-viz", "dataviz",
            ["D3.js", "React", "Python", "FastAPI", "PostgreSQL"], "web-app", 65,
            client_name="DataInsights LLC", completed_days_ago=35,
            project_url="https://dashboard.veritron.com",
        ),
    ]


def testimonial_fixtures(now: int) -> List[Dict[str, Any]]:
    rows = [
        ("Sarah Johnson", "CTO", "TechCorp Inc", "sarah-johnson",
         "Veritron delivered an exceptional e-commerce platform that exceeded our expectations. Their "
         "attention to detail and technical expertise is outstanding. The project was completed on time "
         "and within budget.", 5, True, 25),
        ("Michael Chen", "Founder & CEO", "StartupXYZ", "michael-chen",
         "Working with Veritron was a game-changer for our startup. They built a robust task management "
         "system that our team loves. The real-time collaboration features are incredible.", 5, True, 20),
        ("Emily Rodriguez", "Product Manager", "FitLife LLC", "emily-rodriguez",
         "The mobile app Veritron created for us has been a huge success. User engagement is up 200% and "
         "the app store ratings are fantastic. Highly recommended!", 5, False, 40),
        ("David Thompson", "Marketing Director", "ContentPro Agency", "david-thompson",
         "The AI content generation platform has revolutionized our workflow. We're producing "
         "high-quality content 5x faster. The Veritron team's expertise in AI is impressive.", 5, True, 10),
        ("Lisa Park", "VP of Engineering", "TechScale Corp", "lisa-park",
         "Veritron's DevOps automation suite has transformed our deployment process. What used to take "
         "hours now takes minutes. Their technical expertise saved us months of development time.",
         4, False, 15),
    ]
    return [
        {
            "client_name": name,
            "client_title": title,
            "client_company": company,
            "client_avatar": f"/images/avatars/{avatar}.jpg",
            "testimonial": text,
            "rating": rating,
            "project_id": None,
            "featured": featured,
            "approved": True,
            "sort_order": position,
            "created_at": now - created_days_ago * DAY_MS,
            "updated_at": now,
        }
        for position, (name, title, company, avatar, text, rating, featured, created_days_ago) in enumerate(
            rows, start=1
        )
    ]


def contact_fixtures(now: int) -> List[Dict[str, Any]]:
    return [
        {
            "name": "John Smith",
            "email": "john.smith@example.com",
            "company": "Innovative Solutions Inc",
            "phone": "+1 (555) 123-4567",
            "subject": "Web Development Inquiry",
            "message": (
                "We're looking to rebuild our company website with modern technologies. Would love to "
                "discuss our requirements and get a quote."
            ),
            "service_interest": ["Web Development", "UI/UX Design"],
            "budget_range": "15k-50k",
            "preferred_contact": "email",
            "timeline": "3-months",
            "status": "new",
            "priority": "medium",
            "is_read": False,
            "created_at": now - 2 * DAY_MS,
            "updated_at": now,
        },
        {
            "name": "Amanda Wilson",
            "email": "amanda@startup-venture.com",
            "company": "Startup Venture",
            "phone": "+1 (555) 987-6543",
            "subject": "Mobile App Development",
            "message": (
                "We need a mobile app for our fitness startup. Looking for React Native development with "
                "backend integration."
            ),
            "service_interest": ["Mobile Development", "Cloud Infrastructure"],
            "budget_range": "50k-plus",
            "preferred_contact": "both",
            "timeline": "asap",
            "status": "contacted",
            "priority": "urgent",
            "is_read": True,
            "responded_at": now - 12 * HOUR_MS,
            "created_at": now - 3 * DAY_MS,
            "updated_at": now - 12 * HOUR_MS,
        },
        {
            "name": "Robert Garcia",
            "email": "r.garcia@techconsulting.com",
            "company": "Tech Consulting Group",
            "subject": "AI Integration Consultation",
            "message": (
                "Our client needs AI integration in their existing platform. Looking for consultation on "
                "the best approach."
            ),
            "service_interest": ["AI & Machine Learning", "Technical Consulting"],
            "budget_range": "5k-15k",
            "preferred_contact": "phone",
            "timeline": "1-month",
            "status": "qualified",
            "priority": "high",
            "is_read": True,
            "responded_at": now - 24 * HOUR_MS,
            "notes": (
                "[2025-01-01T12:00:00Z] Initial call scheduled for next week. Client interested in ML "
                "model integration."
            ),
            "created_at": now - 5 * DAY_MS,
            "updated_at": now - 24 * HOUR_MS,
        },
    ]
