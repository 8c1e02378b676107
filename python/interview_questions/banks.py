"""
Static question banks.

Technical and situational questions are partitioned by RoleCategory and
fall back to the ``general`` bank for categories without an entry. Every
other question type draws from one shared bank.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final, Mapping

from .models import QuestionType, RoleCategory


FALLBACK_QUESTION = "Tell me about your experience in this field."


# =============================================================================
# Role-specific technical questions
# =============================================================================

TECHNICAL_QUESTIONS: Final[Mapping[RoleCategory, tuple[str, ...]]] = MappingProxyType({
    RoleCategory.FRONTEND: (
        "How would you optimize the performance of a React application?",
        "Explain your approach to responsive design and mobile-first development",
        "How do you handle state management in large-scale applications?",
        "Describe your experience with component libraries and design systems",
        "How would you implement infinite scrolling or virtualization?",
        "Explain your approach to accessibility (a11y) in web applications",
        "How do you optimize bundle size and loading performance?",
        "Describe your testing strategy for frontend applications",
        "How would you implement server-side rendering (SSR)?",
        "Explain your approach to CSS-in-JS vs traditional CSS",
    ),
    RoleCategory.BACKEND: (
        "How would you design a scalable API architecture?",
        "Explain your approach to database optimization and indexing",
        "How do you handle authentication and authorization at scale?",
        "Describe your experience with microservices vs monolith architecture",
        "How would you implement caching strategies for APIs?",
        "Explain your approach to API versioning and backward compatibility",
        "How do you handle rate limiting and API throttling?",
        "Describe your experience with message queues and event-driven architecture",
        "How would you design a background job processing system?",
        "Explain your approach to monitoring and logging in production",
    ),
    RoleCategory.FULLSTACK: (
        "How do you balance frontend and backend responsibilities in your work?",
        "Describe a full-stack feature you built from scratch",
        "How do you handle real-time data synchronization between client and server?",
        "Explain your approach to API design for frontend consumption",
        "How would you architect a new web application from the ground up?",
        "Describe your experience with modern deployment and DevOps practices",
        "How do you optimize the entire stack for performance?",
        "Explain your testing strategy across the full stack",
    ),
    RoleCategory.MOBILE: (
        "How do you handle offline functionality in mobile apps?",
        "Explain your approach to mobile app performance optimization",
        "How do you manage different screen sizes and device capabilities?",
        "Describe your experience with native vs cross-platform development",
        "How would you implement push notifications at scale?",
        "Explain your approach to mobile app security",
        "How do you handle app store submissions and updates?",
        "Describe your mobile testing and QA strategy",
    ),
    RoleCategory.DATA: (
        "How would you design a data pipeline for real-time analytics?",
        "Explain your approach to data modeling and schema design",
        "How do you handle data quality and validation?",
        "Describe your experience with distributed data processing",
        "How would you optimize slow-running queries?",
        "Explain your approach to data warehousing vs data lakes",
        "How do you ensure data privacy and compliance (GDPR, etc.)?",
        "Describe your experience with ETL/ELT processes",
    ),
    RoleCategory.ML: (
        "How would you deploy a machine learning model to production?",
        "Explain your approach to feature engineering",
        "How do you handle model versioning and monitoring?",
        "Describe your experience with model evaluation and metrics",
        "How would you address model bias and fairness?",
        "Explain your approach to hyperparameter tuning",
        "How do you handle model retraining and continuous learning?",
        "Describe your experience with MLOps and infrastructure",
    ),
    RoleCategory.DEVOPS: (
        "How would you design a CI/CD pipeline from scratch?",
        "Explain your approach to infrastructure as code (IaC)",
        "How do you handle incident response and on-call rotations?",
        "Describe your experience with container orchestration",
        "How would you implement zero-downtime deployments?",
        "Explain your approach to monitoring and observability",
        "How do you handle infrastructure scaling and cost optimization?",
        "Describe your experience with disaster recovery and backup strategies",
    ),
    RoleCategory.SECURITY: (
        "How would you conduct a security audit for a web application?",
        "Explain your approach to threat modeling",
        "How do you handle vulnerability management and patching?",
        "Describe your experience with security compliance (SOC2, ISO, etc.)",
        "How would you implement secure authentication and authorization?",
        "Explain your approach to secrets management",
        "How do you handle security incident response?",
        "Describe your experience with penetration testing",
    ),
    RoleCategory.PRODUCT: (
        "How do you decide what goes into the next release and what gets cut?",
        "Walk me through how you turn customer research into a product requirement",
        "Which metrics would you use to judge whether a new feature succeeded?",
        "How do you write a product spec that engineering can estimate from?",
        "Describe how you run discovery for a problem you don't yet understand",
        "How do you balance customer requests against your long-term product vision?",
        "Explain your approach to pricing and packaging a new feature",
        "How do you communicate roadmap changes to sales and customers?",
    ),
    RoleCategory.DESIGN: (
        "Walk me through your design process from problem statement to handoff",
        "How do you decide which usability issues to fix first?",
        "Describe how you build and maintain a design system",
        "How do you design for accessibility from the start of a project?",
        "Explain how you validate a design before engineering builds it",
        "How do you measure whether a redesign actually improved the experience?",
        "Describe your approach to prototyping at different levels of fidelity",
        "How do you work with engineers during implementation to protect design quality?",
    ),
    RoleCategory.LEADERSHIP: (
        "How do you prioritize technical roadmap items?",
        "Explain your approach to hiring and building teams",
        "How do you handle conflicts within your team?",
        "Describe your experience with agile methodologies",
        "How do you balance technical debt with feature development?",
        "Explain your approach to performance reviews and career development",
        "How do you ensure knowledge sharing within the team?",
        "Describe a time you had to make a difficult technical decision",
    ),
    RoleCategory.SALES: (
        "How do you approach cold outreach and prospecting?",
        "Describe your sales process from lead to close",
        "How do you handle objections during the sales cycle?",
        "Tell me about your most successful deal and how you closed it",
        "How do you manage and prioritize your sales pipeline?",
        "Describe your approach to building long-term client relationships",
        "How do you stay motivated during slow periods?",
        "What's your strategy for upselling and cross-selling?",
    ),
    RoleCategory.MARKETING: (
        "How do you measure the success of marketing campaigns?",
        "Describe your approach to content strategy and creation",
        "How do you identify and reach your target audience?",
        "Tell me about a campaign that didn't perform well and what you learned",
        "How do you balance brand awareness with lead generation?",
        "Describe your experience with marketing analytics and attribution",
        "How do you stay updated on marketing trends and best practices?",
        "What's your approach to A/B testing and optimization?",
    ),
    RoleCategory.FINANCE: (
        "How do you approach financial forecasting and budgeting?",
        "Describe your experience with financial modeling",
        "How do you handle month-end and year-end close processes?",
        "Tell me about a time you identified cost-saving opportunities",
        "How do you ensure compliance with financial regulations?",
        "Describe your approach to variance analysis",
        "How do you communicate financial insights to non-finance stakeholders?",
        "What's your experience with financial reporting systems?",
    ),
    RoleCategory.HR: (
        "How do you approach talent acquisition and recruitment?",
        "Describe your experience with employee relations and conflict resolution",
        "How do you handle sensitive HR situations?",
        "Tell me about a successful employee retention initiative you implemented",
        "How do you ensure compliance with employment laws?",
        "Describe your approach to performance management",
        "How do you build and maintain company culture?",
        "What's your strategy for diversity and inclusion?",
    ),
    RoleCategory.OPERATIONS: (
        "How do you identify and eliminate operational inefficiencies?",
        "Describe your approach to process improvement",
        "How do you manage cross-functional projects?",
        "Tell me about a time you improved operational metrics",
        "How do you balance quality with speed and cost?",
        "Describe your experience with supply chain management",
        "How do you handle capacity planning and resource allocation?",
        "What's your approach to vendor management?",
    ),
    RoleCategory.CUSTOMER_SERVICE: (
        "How do you handle difficult or upset customers?",
        "Describe your approach to measuring customer satisfaction",
        "How do you prioritize customer issues and requests?",
        "Tell me about a time you turned a negative customer experience into a positive one",
        "How do you balance customer needs with company policies?",
        "Describe your experience with customer service tools and systems",
        "How do you train and develop customer service team members?",
        "What's your strategy for reducing customer churn?",
    ),
    RoleCategory.HEALTHCARE: (
        "How do you ensure patient safety and quality of care?",
        "Describe your approach to handling medical emergencies",
        "How do you manage your time with multiple patients?",
        "Tell me about a challenging patient interaction and how you handled it",
        "How do you stay current with medical best practices?",
        "Describe your experience with electronic health records",
        "How do you communicate complex medical information to patients?",
        "What's your approach to working in a multidisciplinary healthcare team?",
    ),
    RoleCategory.EDUCATION: (
        "How do you engage students with different learning styles?",
        "Describe your classroom management approach",
        "How do you assess student progress and learning outcomes?",
        "Tell me about a lesson plan that was particularly effective",
        "How do you handle difficult students or parents?",
        "Describe your approach to curriculum development",
        "How do you integrate technology into your teaching?",
        "What's your strategy for differentiated instruction?",
    ),
    RoleCategory.LEGAL: (
        "How do you approach legal research and case preparation?",
        "Describe your experience with contract negotiation and drafting",
        "How do you manage multiple cases or projects simultaneously?",
        "Tell me about a complex legal issue you resolved",
        "How do you communicate legal concepts to non-legal stakeholders?",
        "Describe your approach to risk management and compliance",
        "How do you stay current with changes in law and regulations?",
        "What's your experience with dispute resolution and litigation?",
    ),
    RoleCategory.CONSULTING: (
        "How do you structure your first two weeks on a new client engagement?",
        "Walk me through how you would size a market you know nothing about",
        "How do you build a recommendation when the client's data is incomplete?",
        "Describe how you present findings to a skeptical executive audience",
        "How do you scope an engagement so it can be delivered on time and budget?",
        "Tell me about a framework you adapted to fit an unusual client problem",
        "How do you hand over work so the client can sustain the change?",
        "What's your approach to managing multiple stakeholders with different goals?",
    ),
    RoleCategory.CREATIVE: (
        "Walk me through your creative process from concept to execution",
        "How do you handle creative feedback and revisions?",
        "Describe a project where you had to balance creativity with client constraints",
        "Tell me about a time your creative work exceeded expectations",
        "How do you stay inspired and overcome creative blocks?",
        "Describe your experience collaborating with other creatives",
        "How do you manage multiple creative projects with tight deadlines?",
        "What's your approach to presenting and defending your creative work?",
    ),
    RoleCategory.HOSPITALITY: (
        "How do you ensure exceptional guest experiences?",
        "Describe your approach to handling guest complaints",
        "How do you manage staff during peak periods?",
        "Tell me about a time you exceeded guest expectations",
        "How do you balance service quality with operational efficiency?",
        "Describe your experience with revenue management",
        "How do you train and develop hospitality staff?",
        "What's your approach to maintaining standards and consistency?",
    ),
    RoleCategory.RETAIL: (
        "How do you drive sales and meet revenue targets?",
        "Describe your approach to visual merchandising and store layout",
        "How do you handle inventory management and shrinkage?",
        "Tell me about a successful promotion or event you executed",
        "How do you coach and develop retail staff?",
        "Describe your experience with retail analytics and reporting",
        "How do you create a positive customer shopping experience?",
        "What's your strategy for managing seasonal fluctuations?",
    ),
    RoleCategory.GENERAL: (
        "Walk me through the most important project on your resume",
        "What skills from your last role would carry over directly to this one?",
        "How do you measure the quality of your own work?",
        "Describe the tools and processes you rely on day to day",
        "What part of this role do you expect to find hardest, and how will you prepare?",
        "How do you keep your knowledge of your field up to date?",
        "Tell me about a result you delivered that you are particularly proud of",
        "How would you spend your first 90 days in this position?",
    ),
})


# =============================================================================
# Role-specific situational questions
# =============================================================================

SITUATIONAL_QUESTIONS: Final[Mapping[RoleCategory, tuple[str, ...]]] = MappingProxyType({
    RoleCategory.FRONTEND: (
        "A critical bug is reported in production affecting user checkout. Walk me through your debugging process.",
        "You need to improve page load time by 50%. What would you prioritize?",
        "A designer hands you mockups that seem technically complex. How do you approach the conversation?",
    ),
    RoleCategory.BACKEND: (
        "Your API starts returning slow responses during peak traffic. How do you investigate?",
        "You discover a database query that's causing performance issues. Walk me through your optimization approach.",
        "A third-party service your system depends on goes down. How do you handle it?",
    ),
    RoleCategory.FULLSTACK: (
        "You need to add a new feature that touches both frontend and backend. How do you plan your approach?",
        "Users report data inconsistencies between what they see and what's in the database. How do you debug?",
        "You're asked to build a real-time feature. What considerations go into your architecture decision?",
    ),
    RoleCategory.MOBILE: (
        "Users complain about battery drain from your app. How do you investigate and fix it?",
        "You need to support both iOS and Android with limited resources. How do you make the decision?",
        "App store reviews mention crashes. Walk me through your crash investigation process.",
    ),
    RoleCategory.DATA: (
        "A stakeholder reports that dashboard numbers don't match their expectations. How do you investigate?",
        "You need to process 10x more data than your current pipeline handles. What's your approach?",
        "You discover data quality issues affecting downstream reports. How do you handle it?",
    ),
    RoleCategory.ML: (
        "Your model's performance degrades over time in production. How do you investigate?",
        "Stakeholders want to understand why the model made a specific prediction. How do you explain it?",
        "You need to deploy a model but have concerns about bias. What steps do you take?",
    ),
    RoleCategory.DEVOPS: (
        "A deployment fails and you need to roll back quickly. Walk me through your process.",
        "You notice infrastructure costs have increased 40% this month. How do you investigate?",
        "A critical security vulnerability is announced. How do you prioritize and respond?",
    ),
    RoleCategory.SECURITY: (
        "You discover a potential data breach. Walk me through your incident response.",
        "A new feature request raises security concerns. How do you communicate the risks?",
        "You need to implement security for a new application. Where do you start?",
    ),
    RoleCategory.PRODUCT: (
        "Engineering says your feature request will take 3x longer than expected. How do you handle it?",
        "Two stakeholders have conflicting priorities for the roadmap. How do you resolve it?",
        "User research contradicts what your biggest customer is asking for. What do you do?",
    ),
    RoleCategory.DESIGN: (
        "Engineering pushes back on your design due to technical constraints. How do you handle it?",
        "Stakeholders disagree with your design direction. How do you navigate the situation?",
        "You have limited time for user research but need to make design decisions. What's your approach?",
    ),
    RoleCategory.SALES: (
        "A prospect goes silent after your proposal. How do you re-engage them?",
        "You're behind on your quarterly quota with one month left. What's your strategy?",
        "A customer is unhappy and threatening to churn. How do you handle the conversation?",
    ),
    RoleCategory.MARKETING: (
        "A campaign underperforms significantly. How do you analyze what went wrong?",
        "You have limited budget but need to hit aggressive growth targets. How do you prioritize?",
        "Your brand messaging isn't resonating with the target audience. What's your approach?",
    ),
    RoleCategory.FINANCE: (
        "You discover a discrepancy in the financial reports. How do you investigate?",
        "The budget needs to be cut by 15%. How do you approach the analysis?",
        "A business unit is asking for budget that wasn't planned. How do you evaluate the request?",
    ),
    RoleCategory.HR: (
        "An employee files a complaint about their manager. How do you handle it?",
        "You need to reduce headcount. How do you approach this difficult situation?",
        "Two top performers have a conflict that's affecting the team. What do you do?",
    ),
    RoleCategory.OPERATIONS: (
        "A key supplier fails to deliver on time. How do you manage the situation?",
        "You need to cut operational costs by 20% without affecting quality. What's your approach?",
        "A process that worked well suddenly starts failing. How do you investigate?",
    ),
    RoleCategory.CUSTOMER_SERVICE: (
        "A customer is extremely upset and demanding a refund you can't authorize. How do you handle it?",
        "Your team is overwhelmed with support tickets. How do you prioritize and manage?",
        "A recurring issue keeps generating support requests. How do you address it systematically?",
    ),
    RoleCategory.HEALTHCARE: (
        "You have multiple patients needing attention simultaneously. How do you prioritize?",
        "A patient disagrees with the recommended treatment plan. How do you handle it?",
        "You notice a colleague making a potential error. What do you do?",
    ),
    RoleCategory.EDUCATION: (
        "A student is struggling despite your efforts. How do you adapt your approach?",
        "Parents disagree with your teaching methods. How do you handle the conversation?",
        "You have students at very different skill levels. How do you manage the classroom?",
    ),
    RoleCategory.LEGAL: (
        "You discover information that could affect an ongoing case. How do you handle it?",
        "A client wants to proceed despite your legal advice against it. What do you do?",
        "You're facing a tight deadline but need more time for proper research. How do you manage?",
    ),
    RoleCategory.CONSULTING: (
        "A client rejects your recommendations. How do you handle the pushback?",
        "You discover the project scope has expanded beyond the original agreement. What's your approach?",
        "Multiple clients have urgent needs at the same time. How do you prioritize?",
    ),
    RoleCategory.HOSPITALITY: (
        "A VIP guest has a complaint during a fully booked night. How do you handle it?",
        "Staff call in sick during your busiest shift. What do you do?",
        "A guest's expectations far exceed what was promised. How do you manage the situation?",
    ),
    RoleCategory.RETAIL: (
        "A customer wants a return that doesn't meet policy. How do you handle it?",
        "You notice potential shoplifting. What's your approach?",
        "Sales are down and corporate is asking for explanations. How do you respond?",
    ),
    RoleCategory.CREATIVE: (
        "A client keeps requesting revisions that go against design best practices. How do you handle it?",
        "You're experiencing creative block with a deadline approaching. What's your process?",
        "Your creative vision conflicts with the client's brief. How do you navigate it?",
    ),
    RoleCategory.LEADERSHIP: (
        "Your team disagrees with a decision from upper management. How do you handle it?",
        "You need to let go of a team member who is well-liked. How do you approach it?",
        "Two of your direct reports have a conflict. How do you resolve it?",
    ),
    RoleCategory.GENERAL: (
        "You're given a task with unclear instructions. How do you proceed?",
        "A colleague takes credit for your work. How do you handle the situation?",
        "You realize you made a mistake that affects others. What do you do?",
    ),
})


# =============================================================================
# Shared banks (same for every role)
# =============================================================================

BEHAVIORAL_QUESTIONS: Final[tuple[str, ...]] = (
    "Tell me about a time you disagreed with a decision. How did you handle it?",
    "Describe a situation where you had to meet a tight deadline. What was your approach?",
    "Tell me about a project that didn't go as planned. What did you learn?",
    "How do you handle receiving critical feedback on your work?",
    "Describe a time you had to work with a difficult colleague or client.",
    "Tell me about your most challenging problem at work and how you solved it.",
    "How do you prioritize when everything seems urgent?",
    "Describe a time you went above and beyond expectations.",
    "Tell me about a time you had to learn something new quickly.",
    "How do you handle ambiguity or unclear expectations?",
    "Tell me about a time you failed. What did you do next?",
    "Describe a situation where you had to influence someone without direct authority.",
)

LEADERSHIP_QUESTIONS: Final[tuple[str, ...]] = (
    "How do you approach mentoring or helping less experienced colleagues?",
    "Describe your leadership style and how it has evolved.",
    "How do you make decisions that affect others on your team?",
    "Tell me about a time you had to drive consensus on a difficult issue.",
    "How do you balance competing priorities in your work?",
    "Describe how you've helped someone grow in their role.",
    "How do you handle underperformance or conflicts in a team?",
    "What's your approach to giving constructive feedback?",
    "How do you foster a positive and productive work environment?",
    "Tell me about a time you had to push back on a request from leadership.",
)

PROBLEM_SOLVING_QUESTIONS: Final[tuple[str, ...]] = (
    "Walk me through how you would approach solving a complex problem you've never seen before.",
    "How do you investigate when something isn't working as expected?",
    "Describe your systematic approach to troubleshooting issues.",
    "How do you break down large, ambiguous problems into manageable parts?",
    "Tell me about a creative solution you developed for a difficult challenge.",
    "How do you validate your assumptions when solving problems?",
    "Describe a time you had to make a decision with incomplete information.",
    "What frameworks or mental models do you use for problem-solving?",
    "How do you know when to stop iterating and ship a solution?",
    "Tell me about a time you identified a problem before it became critical.",
)

CULTURE_FIT_QUESTIONS: Final[tuple[str, ...]] = (
    "What type of work environment do you thrive in?",
    "How do you stay current with trends and best practices in your field?",
    "What motivates you in your work?",
    "Describe your ideal team culture.",
    "How do you handle work-life balance?",
    "What's the most important thing you're looking for in your next role?",
    "How do you prefer to receive feedback?",
    "What does collaboration mean to you?",
    "How do you approach learning new skills or concepts?",
    "What's your definition of success in a role like this?",
)

SOFT_SKILLS_QUESTIONS: Final[tuple[str, ...]] = (
    "Tell me about a time you had to explain a complex concept to someone without technical background.",
    "How do you handle disagreements with colleagues while maintaining professional relationships?",
    "Describe a situation where you had to adapt your communication style for different audiences.",
    "Tell me about a time you successfully mediated a conflict between team members.",
    "How do you build trust and rapport with new colleagues or clients?",
    "Describe a time when active listening helped you solve a problem.",
    "How do you ensure everyone's voice is heard during team discussions?",
    "Tell me about a time you had to deliver difficult feedback. How did you approach it?",
    "How do you handle situations where you disagree with a decision but need to support it?",
    "Describe your approach to giving and receiving constructive criticism.",
    "Tell me about a time you successfully persuaded someone to change their mind.",
    "How do you maintain positive relationships with stakeholders who have competing interests?",
)


@dataclass(frozen=True)
class QuestionBanks:
    """
    Candidate pools for every (question type, role category) pair.

    ``technical`` and ``situational`` are keyed by role category and must
    contain a ``general`` entry. ``shared`` holds one pool per remaining
    question type.
    """

    technical: Mapping[RoleCategory, tuple[str, ...]]
    situational: Mapping[RoleCategory, tuple[str, ...]]
    shared: Mapping[QuestionType, tuple[str, ...]] = field(default_factory=dict)

    def pool_for(
        self,
        question_type: QuestionType,
        category: RoleCategory,
    ) -> tuple[str, ...]:
        """Return the candidate pool for one slot."""
        if question_type == QuestionType.TECHNICAL:
            return self._role_pool(self.technical, category)
        if question_type == QuestionType.SITUATIONAL:
            return self._role_pool(self.situational, category)
        return self.shared.get(question_type) or self.shared.get(
            QuestionType.BEHAVIORAL, ()
        )

    @staticmethod
    def _role_pool(
        banks: Mapping[RoleCategory, tuple[str, ...]],
        category: RoleCategory,
    ) -> tuple[str, ...]:
        return banks.get(category) or banks.get(RoleCategory.GENERAL, ())


DEFAULT_BANKS = QuestionBanks(
    technical=TECHNICAL_QUESTIONS,
    situational=SITUATIONAL_QUESTIONS,
    shared=MappingProxyType({
        QuestionType.BEHAVIORAL: BEHAVIORAL_QUESTIONS,
        QuestionType.LEADERSHIP: LEADERSHIP_QUESTIONS,
        QuestionType.PROBLEM_SOLVING: PROBLEM_SOLVING_QUESTIONS,
        QuestionType.CULTURE_FIT: CULTURE_FIT_QUESTIONS,
        QuestionType.SOFT_SKILLS: SOFT_SKILLS_QUESTIONS,
    }),
)
