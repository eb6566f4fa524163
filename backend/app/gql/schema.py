from logging import getLogger

import strawberry
from graphql import GraphQLError
from strawberry.extensions import MaskErrors, SchemaExtension
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from app.core.config import settings
from app.exceptions.base import AppError
from app.gql.context import get_context
from app.gql.resolvers import Mutation, Query

logger = getLogger(__name__)


def should_mask_error(error: GraphQLError) -> bool:
    original = error.original_error
    if original is None or isinstance(original, AppError | GraphQLError):
        return False
    return True


class AppErrorCodes(SchemaExtension):
    """Expose the code and status of application errors in the error extensions."""

    def on_operation(self):
        yield
        result = self.execution_context.result
        if result is None or not result.errors:
            return
        for error in result.errors:
            original = error.original_error
            if isinstance(original, AppError):
                error.extensions = {
                    **(error.extensions or {}),
                    "code": original.code,
                    "status": original.status_code,
                }


class AppSchema(strawberry.Schema):
    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if original is None or isinstance(original, GraphQLError):
                logger.info(f"GraphQL error: {error.message}")
            elif isinstance(original, AppError):
                logger.warning(f"{original.status_code} Error: {original.detail}")
            else:
                logger.error(f"Unhandled GraphQL error: {error.message}", exc_info=original)


schema = AppSchema(
    query=Query,
    mutation=Mutation,
    extensions=[
        AppErrorCodes,
        lambda: MaskErrors(
            should_mask_error=should_mask_error,
            error_message=AppError.detail,
        ),
    ],
)

graphql_router = GraphQLRouter(
    schema,
    context_getter=get_context,
    graphql_ide=None if settings.ENVIRONMENT == "production" else "graphiql",
)
