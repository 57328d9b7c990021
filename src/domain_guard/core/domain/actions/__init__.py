from domain_guard.core.domain.actions.action_plan import ActionPlan
from domain_guard.core.domain.actions.review_comment import ReviewComment

__all__ = ["ActionPlan", "ReviewComment"]
