from sqlalchemy import insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Song
from app.exceptions import AddSongError, store_error_detail
from app.schemas.song import SongIn


async def add_song(
    song: SongIn,
    session: AsyncSession
) -> Song:
    """
    插入一首歌，并用 RETURNING 取回数据库生成的 id 和 play_count。
    """
    stmt = (
        insert(Song)
        .values(
            title=song.title,
            artist=song.artist,
            genre=song.genre,
        )
        .returning(Song)
    )

    try:
        result = await session.execute(stmt)
        created = result.scalar_one_or_none()
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        raise AddSongError(store_error_detail(e)) from e

    # 没有返回行说明插入没有生效
    if created is None:
        raise AddSongError()
    return created
