"""In-memory record store for the active and deleted rosters."""

import logging
import threading
import time
from collections.abc import Callable, Container, Iterable
from decimal import Decimal

from dorm_app.core.clock import Clock
from dorm_app.models.base import RecordModel
from dorm_app.models.student import Payment, Student, StudentProfile

logger = logging.getLogger(__name__)


class StoreSnapshot(RecordModel):
    """Immutable view of both rosters at one point in time."""

    students: tuple[Student, ...] = ()
    deleted_students: tuple[Student, ...] = ()


class MonotonicIdSource:
    """Issues ``<prefix>-<millis>`` ids that never go backwards.

    Two calls within the same millisecond get consecutive values, and a
    candidate already present in ``taken`` is skipped.
    """

    def __init__(self, prefix: str, millis: Callable[[], int] | None = None):
        self.prefix = prefix
        self._millis = millis or (lambda: time.time_ns() // 1_000_000)
        self._last = 0

    def next(self, taken: Container[str] = ()) -> str:
        value = max(self._millis(), self._last + 1)
        while f"{self.prefix}-{value}" in taken:
            value += 1
        self._last = value
        return f"{self.prefix}-{value}"


class RecordStore:
    """Owner of the roster and the deleted roster.

    Every mutation returns the resulting snapshot. A mutation that changes
    nothing (unknown id) returns the very same snapshot object, so callers
    can detect changes with ``is``.
    """

    def __init__(self, clock: Clock, students: Iterable[Student] = ()):
        self._clock = clock
        self._lock = threading.Lock()
        self._snapshot = StoreSnapshot(students=tuple(students))
        self._student_ids = MonotonicIdSource("student")
        self._payment_ids = MonotonicIdSource("payment")

    @property
    def snapshot(self) -> StoreSnapshot:
        return self._snapshot

    @property
    def students(self) -> tuple[Student, ...]:
        return self._snapshot.students

    @property
    def deleted_students(self) -> tuple[Student, ...]:
        return self._snapshot.deleted_students

    def get_student(self, student_id: str) -> Student | None:
        """Find a student in the active roster."""
        return next((s for s in self._snapshot.students if s.id == student_id), None)

    def get_deleted_student(self, student_id: str) -> Student | None:
        return next((s for s in self._snapshot.deleted_students if s.id == student_id), None)

    def load(self, students: Iterable[Student]) -> StoreSnapshot:
        """Replace the active roster wholesale (used for seeding)."""
        with self._lock:
            self._snapshot = StoreSnapshot(
                students=tuple(students),
                deleted_students=self._snapshot.deleted_students,
            )
            logger.info(f"[STORE] Loaded {len(self._snapshot.students)} students")
            return self._snapshot

    # ------------------------------------------------------------------
    # Student mutations
    # ------------------------------------------------------------------

    def add_student(self, profile: StudentProfile) -> StoreSnapshot:
        """Append a new student with a fresh id, no payments and today's date."""
        with self._lock:
            current = self._snapshot
            taken = {s.id for s in current.students} | {s.id for s in current.deleted_students}
            student = Student(
                **profile.model_dump(),
                id=self._student_ids.next(taken),
                created_date=self._clock().date(),
                payments=(),
            )
            logger.info(f"[STORE] Student added: id={student.id}, name={student.name}")
            return self._publish(current.model_copy(update={"students": current.students + (student,)}))

    def update_student(self, record: Student) -> StoreSnapshot:
        """Replace the student carrying the same id. Unknown ids are ignored."""
        with self._lock:
            current = self._snapshot
            if not any(s.id == record.id for s in current.students):
                logger.debug(f"[STORE] Update ignored, unknown student {record.id}")
                return current
            students = tuple(record if s.id == record.id else s for s in current.students)
            logger.info(f"[STORE] Student updated: id={record.id}")
            return self._publish(current.model_copy(update={"students": students}))

    def delete_student(self, student_id: str) -> StoreSnapshot:
        """Move a student from the roster to the deleted roster."""
        with self._lock:
            current = self._snapshot
            student = next((s for s in current.students if s.id == student_id), None)
            if student is None:
                logger.debug(f"[STORE] Delete ignored, unknown student {student_id}")
                return current
            logger.info(f"[STORE] Student deleted: id={student_id}")
            return self._publish(
                StoreSnapshot(
                    students=tuple(s for s in current.students if s.id != student_id),
                    deleted_students=current.deleted_students + (student,),
                )
            )

    def restore_student(self, record: Student) -> StoreSnapshot:
        """Move a record back to the roster.

        The record is appended even when its id is not in the deleted roster,
        which can leave two entries with the same id in the roster.
        """
        with self._lock:
            current = self._snapshot
            if not any(s.id == record.id for s in current.deleted_students):
                logger.warning(f"[STORE] Restoring {record.id} which is not in the deleted roster")
            logger.info(f"[STORE] Student restored: id={record.id}")
            return self._publish(
                StoreSnapshot(
                    students=current.students + (record,),
                    deleted_students=tuple(
                        s for s in current.deleted_students if s.id != record.id
                    ),
                )
            )

    # ------------------------------------------------------------------
    # Payment mutations
    # ------------------------------------------------------------------

    def add_payment(self, student_id: str, amount: Decimal | int | float | str) -> StoreSnapshot:
        """Record an unconfirmed payment dated today."""
        with self._lock:
            current = self._snapshot
            student = next((s for s in current.students if s.id == student_id), None)
            if student is None:
                logger.debug(f"[STORE] Payment ignored, unknown student {student_id}")
                return current
            payment = Payment(
                id=self._payment_ids.next({p.id for p in student.payments}),
                amount=Decimal(str(amount)),
                date=self._clock().date(),
                confirmed=False,
            )
            logger.info(
                f"[STORE] Payment added: student={student_id}, payment={payment.id}, amount={payment.amount}"
            )
            return self._publish(
                self._with_payments(current, student_id, lambda payments: payments + (payment,))
            )

    def confirm_payment(self, student_id: str, payment_id: str) -> StoreSnapshot:
        """Mark a payment as confirmed. Unknown ids are ignored."""
        with self._lock:
            current = self._snapshot
            payment = self._find_payment(current, student_id, payment_id)
            if payment is None or payment.confirmed:
                return current

            def confirm(payments: tuple[Payment, ...]) -> tuple[Payment, ...]:
                return tuple(
                    p.model_copy(update={"confirmed": True}) if p.id == payment_id else p
                    for p in payments
                )

            logger.info(f"[STORE] Payment confirmed: student={student_id}, payment={payment_id}")
            return self._publish(self._with_payments(current, student_id, confirm))

    def delete_payment(self, student_id: str, payment_id: str) -> StoreSnapshot:
        """Remove a payment from a student. Unknown ids are ignored."""
        with self._lock:
            current = self._snapshot
            if self._find_payment(current, student_id, payment_id) is None:
                return current
            logger.info(f"[STORE] Payment deleted: student={student_id}, payment={payment_id}")
            return self._publish(
                self._with_payments(
                    current,
                    student_id,
                    lambda payments: tuple(p for p in payments if p.id != payment_id),
                )
            )

    # ------------------------------------------------------------------

    def _publish(self, snapshot: StoreSnapshot) -> StoreSnapshot:
        self._snapshot = snapshot
        return snapshot

    @staticmethod
    def _find_payment(snapshot: StoreSnapshot, student_id: str, payment_id: str) -> Payment | None:
        student = next((s for s in snapshot.students if s.id == student_id), None)
        return student.find_payment(payment_id) if student else None

    @staticmethod
    def _with_payments(
        snapshot: StoreSnapshot,
        student_id: str,
        change: Callable[[tuple[Payment, ...]], tuple[Payment, ...]],
    ) -> StoreSnapshot:
        students = tuple(
            s.model_copy(update={"payments": change(s.payments)}) if s.id == student_id else s
            for s in snapshot.students
        )
        return snapshot.model_copy(update={"students": students})
