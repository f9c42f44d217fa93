# backend/routers/seed.py

from fastapi import APIRouter, HTTPException, Request

from services.seed_generator import SeedError, seed_database

router = APIRouter(tags=["Seed"])


@router.get("/seed")
def seed(request: Request):
    """
    Writes 50 random transactions to the database.
    The read endpoints never look at them; they always use the remote source.
    """
    try:
        seed_database(request.app.state.engine)
    except SeedError as e:
        raise HTTPException(
            status_code=500,
            detail={"message": "Error seeding database", "error": str(e)},
        )
    return {"message": "Database seeded successfully!"}
