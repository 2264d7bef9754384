from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Song
from app.exceptions import SongNotFound


async def play_song(
    song_id: int,
    session: AsyncSession
) -> Song:
    """
    播放次数加一，返回更新后的整行。
    找不到 id 或数据库出错都按“找不到”处理。
    """
    stmt = (
        update(Song)
        .where(Song.id == song_id)
        .values(play_count=Song.play_count + 1)
        .returning(Song)
        .execution_options(synchronize_session=False)
    )

    try:
        result = await session.execute(stmt)
        song = result.scalar_one_or_none()
        await session.commit()
    except SQLAlchemyError as e:
        await session.rollback()
        raise SongNotFound(song_id) from e

    if song is None:
        raise SongNotFound(song_id)
    return song
