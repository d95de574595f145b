# storefront/services/notification_service.py
from storefront.celery_worker import celery_app
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """
    Serwis do wysylania powiadomien.
    Uzywa Celery do asynchronicznego przetwarzania.
    """

    @staticmethod
    def send_order_notification(user_id: str, order_id: str, total_price: float):
        """
        Wysyla powiadomienie o przyjeciu zamowienia.
        """
        send_order_notification_task.delay(user_id, order_id, total_price)


@celery_app.task(name="storefront.services.notification_service.send_order_notification_task")
def send_order_notification_task(user_id: str, order_id: str, total_price: float):
    """
    Celery task - tylko loguje, kanal wysylki (email/whatsapp) jest poza tym serwisem.
    """
    logger.info(f"[NOTIFICATION] User {user_id}: order {order_id} placed, total {total_price:.2f}")

    return {"user_id": user_id, "order_id": order_id, "status": "sent"}
