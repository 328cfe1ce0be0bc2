from typing import List

from pydantic import RootModel

from mindtrace.core import TaskSchema
from teamboard.models import CommentCreateRequest, CommentResponse

ListCommentsSchema = TaskSchema(
    name="teamboard_list_comments",
    input_schema=None,
    output_schema=RootModel[List[CommentResponse]],
)

CreateCommentSchema = TaskSchema(
    name="teamboard_create_comment",
    input_schema=CommentCreateRequest,
    output_schema=CommentResponse,
)

DeleteCommentSchema = TaskSchema(
    name="teamboard_delete_comment",
    input_schema=None,
    output_schema=CommentResponse,
)

__all__ = [
    "CreateCommentSchema",
    "DeleteCommentSchema",
    "ListCommentsSchema",
]
