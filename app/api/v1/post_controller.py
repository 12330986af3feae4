# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, HTTPException, Response, status

# Local application imports
from ...application.dto.post_dto import PostCreateRequest, PostUpdateRequest, PostResponse
from ...application.use_cases.post.create_post import CreatePostUseCase
from ...application.use_cases.post.list_posts import ListPostsUseCase
from ...application.use_cases.post.get_post import GetPostUseCase
from ...application.use_cases.post.update_post import UpdatePostUseCase
from ...application.use_cases.post.delete_post import DeletePostUseCase
from ...core.exceptions import NotFoundError, ValidationError
from ...di.container import get_container


router = APIRouter(tags=["posts"])


@router.get("", response_model=List[PostResponse])
async def list_posts() -> List[PostResponse]:
    """
    List all blog posts
    
    Returns:
        List of PostResponse objects
    """
    container = get_container()
    list_posts_use_case = container.get(ListPostsUseCase)
    
    return await list_posts_use_case.execute()


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(request: PostCreateRequest) -> PostResponse:
    """
    Create a new blog post
    
    Args:
        request: Post creation request with title, content and author
        
    Returns:
        PostResponse with the assigned id and created timestamp
    """
    container = get_container()
    create_post_use_case = container.get(CreatePostUseCase)
    
    try:
        return await create_post_use_case.execute(request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: str) -> PostResponse:
    """
    Get a blog post by ID
    
    Args:
        post_id: ID of the post
        
    Returns:
        PostResponse with post information
    """
    container = get_container()
    get_post_use_case = container.get(GetPostUseCase)
    
    try:
        return await get_post_use_case.execute(post_id)
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )


# 201 rather than 200 is kept for existing clients
@router.put("/{post_id}", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def update_post(post_id: str, request: PostUpdateRequest) -> PostResponse:
    """
    Update the supplied fields of a blog post
    
    Args:
        post_id: ID of the post
        request: Fields to change; an `id` in the body must equal post_id
        
    Returns:
        PostResponse of the updated post
    """
    container = get_container()
    update_post_use_case = container.get(UpdatePostUseCase)
    
    try:
        return await update_post_use_case.execute(post_id=post_id, request=request)
    except ValidationError as exception:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=exception.message
        )
    except NotFoundError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=exception.user_message
        )


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_post(post_id: str) -> Response:
    """
    Delete a blog post. Unknown IDs also answer 204.
    
    Args:
        post_id: ID of the post
    """
    container = get_container()
    delete_post_use_case = container.get(DeletePostUseCase)
    
    await delete_post_use_case.execute(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
