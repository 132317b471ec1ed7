from .audit_hooks import collect_degraded_fields, log_analysis_call

__all__ = ["collect_degraded_fields", "log_analysis_call"]
