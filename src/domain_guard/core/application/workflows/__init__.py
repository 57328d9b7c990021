from domain_guard.core.application.workflows.guard_evaluation_workflow import (
    GuardEvaluationResult,
    GuardEvaluationWorkflow,
)

__all__ = ["GuardEvaluationResult", "GuardEvaluationWorkflow"]
