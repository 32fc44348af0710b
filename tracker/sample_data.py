"""
Demo projects used to seed a freshly bootstrapped business.

The same definitions double as the read-only fallback dataset shown when the
database cannot be reached.
"""
from datetime import date
from typing import List

from . import models
from .core.stamps import utcnow
from .enums import EffortLevel, ProjectStatus

SAMPLE_PROJECTS = [
    {
        "project_name": "Customer Portal Enhancement",
        "project_description": "Improve the customer self-service portal with new features including advanced search, user dashboard improvements, and mobile responsiveness enhancements.",
        "status": ProjectStatus.IN_PROGRESS,
        "effort_level": EffortLevel.HIGH,
        "time_commitment_per_week": 15,
        "project_owner": "John Smith",
        "support_management_resource": "Sarah Johnson",
        "support_role": "Technical Lead",
        "target_completion_date": date(2024, 8, 15),
        "start_date": date(2024, 7, 1),
        "expected_outcomes": "Improved customer satisfaction, reduced support tickets, better user experience",
        "training_needed": "React advanced patterns, API integration best practices",
        "tool_process_change": "New deployment pipeline, updated testing framework",
        "meeting_cadence": "Weekly standup, bi-weekly review",
        "comm_channel": "#customer-portal-team",
        "escalation_path": "Sarah Johnson -> Mike Davis -> CTO",
        "dependencies": "API team completion of user endpoints, Design team mockups",
        "key_milestones": "Phase 1: Search feature (July 15), Phase 2: Dashboard (Aug 1), Phase 3: Mobile (Aug 15)",
        "risks_blockers": "API integration delays, potential scope creep from stakeholders",
        "action_items": "1. Complete search API integration, 2. Review mobile designs, 3. Setup testing environment",
        "latest_update": "Search feature 80% complete, mobile designs approved, testing environment ready",
        "project_docs_links": "https://wiki.company.com/customer-portal, https://github.com/company/portal-docs",
    },
    {
        "project_name": "Support Ticket Automation",
        "project_description": "Automate common support ticket responses using AI and machine learning to reduce response time and improve customer satisfaction.",
        "status": ProjectStatus.REVIEW,
        "effort_level": EffortLevel.MEDIUM,
        "time_commitment_per_week": 8,
        "project_owner": "Sarah Johnson",
        "support_management_resource": "Mike Davis",
        "support_role": "Project Manager",
        "target_completion_date": date(2024, 7, 30),
        "start_date": date(2024, 6, 15),
        "expected_outcomes": "Reduced response time by 50%, improved customer satisfaction scores",
        "training_needed": "AI/ML basics, ticket system API",
        "tool_process_change": "Integration with existing ticket system",
        "meeting_cadence": "Bi-weekly check-ins",
        "comm_channel": "#support-automation",
        "escalation_path": "Mike Davis -> Director of Support",
        "dependencies": "AI team model training, Legal approval for automated responses",
        "key_milestones": "Model training (June 30), Integration testing (July 15), Go-live (July 30)",
        "risks_blockers": "Model accuracy concerns, legal compliance requirements",
        "action_items": "1. Complete model testing, 2. Legal review, 3. Staff training materials",
        "latest_update": "Model testing complete, awaiting legal approval, training materials 90% done",
        "project_docs_links": "https://docs.company.com/support-automation",
    },
    {
        "project_name": "Knowledge Base Restructure",
        "project_description": "Reorganize and update the internal knowledge base to improve searchability and user experience for both staff and customers.",
        "status": ProjectStatus.TODO,
        "effort_level": EffortLevel.LOW,
        "time_commitment_per_week": 5,
        "project_owner": "Mike Davis",
        "support_management_resource": "Lisa Chen",
        "support_role": "Content Manager",
        "target_completion_date": date(2024, 9, 1),
        "start_date": date(2024, 7, 10),
        "expected_outcomes": "Improved search functionality, better content organization, reduced time to find information",
        "training_needed": "Content management system, SEO basics",
        "tool_process_change": "New content management workflow",
        "meeting_cadence": "Weekly content review",
        "comm_channel": "#knowledge-base",
        "escalation_path": "Lisa Chen -> Head of Documentation",
        "dependencies": "Content audit completion, New CMS selection",
        "key_milestones": "Content audit (July 20), Structure design (Aug 1), Migration (Aug 15), Testing (Aug 30)",
        "risks_blockers": "Large volume of legacy content, resource availability",
        "action_items": "1. Complete content audit, 2. Design new structure, 3. Create migration plan",
        "latest_update": "Content audit 60% complete, initial structure design in progress",
        "project_docs_links": "https://wiki.company.com/kb-restructure",
    },
    {
        "project_name": "Mobile App Bug Fixes",
        "project_description": "Fix critical bugs in the mobile application affecting user login, data synchronization, and push notifications.",
        "status": ProjectStatus.COMPLETED,
        "effort_level": EffortLevel.HIGH,
        "time_commitment_per_week": 20,
        "project_owner": "Lisa Chen",
        "support_management_resource": "John Smith",
        "support_role": "QA Lead",
        "target_completion_date": date(2024, 7, 10),
        "start_date": date(2024, 6, 1),
        "expected_outcomes": "Stable mobile app, improved user experience, reduced crash reports",
        "training_needed": "Mobile debugging tools, crash analysis",
        "tool_process_change": "Enhanced testing procedures",
        "meeting_cadence": "Daily standups during critical phase",
        "comm_channel": "#mobile-bugs",
        "escalation_path": "John Smith -> Mobile Team Lead",
        "dependencies": "QA team availability, App store approval process",
        "key_milestones": "Bug identification (June 10), Fixes implementation (June 25), Testing (July 5), Release (July 10)",
        "risks_blockers": "Complex legacy code, app store review delays",
        "action_items": "All action items completed",
        "latest_update": "Project completed successfully, app released with all critical bugs fixed",
        "project_docs_links": "https://github.com/company/mobile-app/issues",
    },
    {
        "project_name": "Security Audit Implementation",
        "project_description": "Implement security recommendations from the recent third-party security audit to enhance system security and compliance.",
        "status": ProjectStatus.IN_PROGRESS,
        "effort_level": EffortLevel.HIGH,
        "time_commitment_per_week": 12,
        "project_owner": "Alex Rodriguez",
        "support_management_resource": "Sarah Johnson",
        "support_role": "Security Coordinator",
        "target_completion_date": date(2024, 8, 30),
        "start_date": date(2024, 7, 15),
        "expected_outcomes": "Enhanced security posture, compliance with industry standards, reduced security risks",
        "training_needed": "Security best practices, compliance requirements",
        "tool_process_change": "New security monitoring tools, updated access controls",
        "meeting_cadence": "Weekly security review",
        "comm_channel": "#security-audit",
        "escalation_path": "Sarah Johnson -> CISO",
        "dependencies": "Security team availability, Budget approval for new tools",
        "key_milestones": "Access control update (Aug 1), Monitoring setup (Aug 15), Final review (Aug 30)",
        "risks_blockers": "Complex system integrations, potential service disruptions",
        "action_items": "1. Update access controls, 2. Install monitoring tools, 3. Staff training",
        "latest_update": "Access control updates 70% complete, monitoring tools selected and ordered",
        "project_docs_links": "https://security.company.com/audit-2024",
    },
]


def fallback_projects(business_id: str, created_by: str = "sample-data") -> List[models.Project]:
    """Unsaved Project objects built from the sample definitions, ids ``sample-1``..``sample-5``."""
    now = utcnow()
    return [
        models.Project(
            id=f"sample-{index}",
            business_id=business_id,
            created_by=created_by,
            created_at=now,
            updated_at=now,
            **definition,
        )
        for index, definition in enumerate(SAMPLE_PROJECTS, start=1)
    ]
