from .lesson_filter_compiler import (
    CompiledLessonQuery,
    LessonFilterParams,
    compile_lesson_query,
    compile_recommendation_predicate,
)

__all__ = [
    "CompiledLessonQuery",
    "LessonFilterParams",
    "compile_lesson_query",
    "compile_recommendation_predicate",
]
