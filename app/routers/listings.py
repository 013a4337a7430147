from fastapi import APIRouter

from app.dependencies import AppStateDep, RendererDep
from app.schemas.listing import ListingQuery, ListingsResponse
from app.services.listings import extract_listings

router = APIRouter(prefix="/api")


@router.post("/listings/{page:path}", response_model=ListingsResponse)
async def filter_listings(
    page: str,
    query: ListingQuery,
    state: AppStateDep,
    renderer: RendererDep,
) -> ListingsResponse:
    listings = extract_listings(renderer.load(page))
    engine = state.listings

    if query.reset:
        engine.reset()
    else:
        engine.set_filters(query.filters)
        engine.apply_filters(listings)
        if query.sort:
            engine.apply_sort(listings, query.sort)
        else:
            engine.sort_key = None

    views = engine.project(listings)
    return ListingsResponse(
        active_filters=sorted(engine.active_tags),
        sort=engine.sort_key,
        total=len(views),
        shown=sum(1 for v in views if v.visible),
        items=views,
    )
