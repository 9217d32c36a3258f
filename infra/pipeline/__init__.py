from infra.pipeline.logger import PipelineLogger

__all__ = [
    "PipelineLogger",
]
