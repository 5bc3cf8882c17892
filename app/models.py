from app.core.database import Base
from sqlalchemy import (Column, String, Integer, BigInteger,
                        DateTime, Boolean, func)

# sqlite only autoincrements INTEGER PRIMARY KEY
BookId = BigInteger().with_variant(Integer(), 'sqlite')

class Book(Base):
    __tablename__ = 'books'

    id = Column(BookId, primary_key=True, autoincrement=True)
    code = Column(String(50), nullable=False)
    name = Column(String(255), nullable=False, default='')
    # column name keeps the existing schema's spelling
    author = Column('auther', String(255), nullable=False, default='')
    is_archived = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now())

    def __repr__(self):
        return f'<Book id={self.id} code={self.code!r}>'
