"""
Operations layer.

Transport-agnostic async operations shared by the API and the CLI.  Every
operation takes an :class:`~storefront.ops.context.OperationContext` and
returns an :class:`~storefront.ops.result.OperationResult`; none of them
raise for expected failures.
"""
