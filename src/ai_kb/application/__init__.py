"""Application services"""

from ai_kb.application.knowledge_base_service import KnowledgeBaseService

__all__ = ["KnowledgeBaseService"]
