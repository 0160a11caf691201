from schemelet.evaluation.evaluator import evaluate

__all__ = ["evaluate"]
