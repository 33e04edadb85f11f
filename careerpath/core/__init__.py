"""
Core business logic modules for CareerPath.

Submodules:
- skills: Skill parsing and normalization
- matching: Skill-based job matching engine
- analytics: Admin statistics
- auth: Password hashing, session tokens, role checks
"""
