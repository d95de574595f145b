# storefront/api/__init__.py
from fastapi import APIRouter

from storefront.api.routers import admins, carts, cars, health, labels, orders, products, users

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(admins.router)
api_router.include_router(products.router)
api_router.include_router(labels.categories_router)
api_router.include_router(labels.brands_router)
api_router.include_router(carts.router)
api_router.include_router(orders.router)
api_router.include_router(cars.router)
