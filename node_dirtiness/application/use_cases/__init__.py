"""Application 层用例 - 业务逻辑编排"""

from node_dirtiness.application.use_cases.compute_node_dirtiness import (
    ComputeNodeDirtinessInput,
    ComputeNodeDirtinessUseCase,
)

__all__ = ["ComputeNodeDirtinessInput", "ComputeNodeDirtinessUseCase"]
