from fastapi import APIRouter, Body, Depends, Path, Query

from sqlalchemy.ext.asyncio import AsyncSession

from app.session import get_async_session
from app.schemas.song import SongIn, SongOut, ErrorOut
from app.crud.insert import add_song
from app.crud.search import SongFilter, search_songs
from app.crud.update import play_song

router = APIRouter(prefix="/songs", tags=["song"])

# 出错时状态码仍是 200，响应体为 {"error": ...}
STORE_ERROR = {200: {"model": SongOut | ErrorOut}}


@router.post("/new", response_model=SongOut, responses=STORE_ERROR)
async def new_song(
    song: SongIn = Body(),
    session: AsyncSession = Depends(get_async_session)
):
    return await add_song(song, session)


@router.get("/search", response_model=list[SongOut], responses={200: {"model": list[SongOut] | ErrorOut}})
async def search(
    title: str | None = Query(None),
    artist: str | None = Query(None),
    genre: str | None = Query(None),
    session: AsyncSession = Depends(get_async_session)
):
    """
    三个参数都可选，按子串、不区分大小写匹配，多个条件取交集。
    """
    song_filter = SongFilter.from_query(title, artist, genre)
    return await search_songs(song_filter, session)


@router.get("/play/{song_id}", response_model=SongOut, responses=STORE_ERROR)
async def play(
    song_id: int = Path(),
    session: AsyncSession = Depends(get_async_session)
):
    return await play_song(song_id, session)
