"""Article CRUD and search endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from article_catalog.application.schemas import ArticleCreate, ArticleUpdate, ArticleResponse
from article_catalog.application.services import ArticleService
from article_catalog.application.services.article_filter_builder import (
    DEFAULT_PAGE_NUMBER,
    DEFAULT_PAGE_SIZE,
)
from article_catalog.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    SearchValidationError,
)
from article_catalog.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])

TOTAL_COUNT_HEADER = "X-Total-Count"


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article.

    The result is not paginated: the whole catalog is returned. Use
    ``/articles/search`` for bounded, sorted pages.
    """
    articles = await service.list_articles()
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


# Declared before "/{code}" so "search" is never read as an article code.
@router.get("/search", response_model=list[ArticleResponse])
async def search_articles(
    response: Response,
    name: str | None = Query(None, description="Case-insensitive substring of the article name"),
    min_pot_size: int | None = Query(None, alias="minPotSize", description="Inclusive lower bound"),
    max_pot_size: int | None = Query(None, alias="maxPotSize", description="Inclusive upper bound"),
    colour: str | None = Query(None, description="Exact colour"),
    product_group: str | None = Query(None, alias="productGroup", description="Exact product group"),
    sort_field: str = Query(
        "name",
        alias="sortField",
        description="name, potSize, plantHeight, colour or productGroup; anything else sorts by name",
    ),
    sort_order: str = Query("asc", alias="sortOrder", description="asc or desc"),
    page_number: int = Query(DEFAULT_PAGE_NUMBER, alias="pageNumber", description="1-based page"),
    page_size: int = Query(DEFAULT_PAGE_SIZE, alias="pageSize", description="1 to 100"),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Filter, sort and page the catalog."""
    try:
        page = await service.search_articles(
            name=name,
            min_pot_size=min_pot_size,
            max_pot_size=max_pot_size,
            colour=colour,
            product_group=product_group,
            sort_field=sort_field,
            sort_order=sort_order,
            page_number=page_number,
            page_size=page_size,
        )
    except SearchValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    response.headers[TOTAL_COUNT_HEADER] = str(page.total_matches)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in page.items]


@router.get("/{code}", response_model=ArticleResponse)
async def get_article(
    code: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by code."""
    try:
        article = await service.get_article(code)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    request: Request,
    response: Response,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article. The Location header points at the new resource."""
    try:
        article = await service.create_article(data)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    response.headers["Location"] = str(request.url_for("get_article", code=article.code))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{code}", response_model=ArticleResponse)
async def update_article(
    code: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Replace an article's fields. The code in the path is authoritative."""
    try:
        article = await service.update_article(code, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{code}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    code: str,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by code."""
    try:
        await service.delete_article(code)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
