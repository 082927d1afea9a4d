"""api/routes — one APIRouter per endpoint group."""
