"""Task API router."""

from fastapi import APIRouter, Depends, Request, status

from ..gateway import TaskGateway
from ..models import (
    CompletedResponse,
    CompletedUpdate,
    DeletedResponse,
    DueDateResponse,
    DueDateUpdate,
    PriorityResponse,
    PriorityUpdate,
    Task,
    TaskCreate,
    TitleResponse,
    TitleUpdate,
)

router = APIRouter(prefix="/tasks", tags=["tasks"])


def get_gateway(request: Request) -> TaskGateway:
    """Gateway created at startup and kept on the application state."""
    return request.app.state.gateway


# =============================================================================
# Collection
# =============================================================================


@router.get("", response_model=list[Task])
def list_tasks(gateway: TaskGateway = Depends(get_gateway)):
    """Get all tasks, newest first."""
    return gateway.list_tasks()


@router.post("", response_model=Task, status_code=status.HTTP_201_CREATED)
def create_task(task_data: TaskCreate, gateway: TaskGateway = Depends(get_gateway)):
    """Create a new task."""
    return gateway.create_task(task_data.title, task_data.priority, task_data.due_date)


# =============================================================================
# Single-field updates
# =============================================================================


@router.patch("/{task_id}/title", response_model=TitleResponse)
def update_title(task_id: str, body: TitleUpdate, gateway: TaskGateway = Depends(get_gateway)):
    """Rename a task."""
    title = gateway.rename(task_id, body.title)
    return TitleResponse(id=task_id, title=title)


@router.patch("/{task_id}/priority", response_model=PriorityResponse)
def update_priority(
    task_id: str, body: PriorityUpdate, gateway: TaskGateway = Depends(get_gateway)
):
    """Change a task's priority."""
    priority = gateway.reprioritize(task_id, body.priority)
    return PriorityResponse(id=task_id, priority=priority)


@router.patch("/{task_id}/dueDate", response_model=DueDateResponse)
def update_due_date(task_id: str, body: DueDateUpdate, gateway: TaskGateway = Depends(get_gateway)):
    """Set or clear a task's due date."""
    due_date = gateway.reschedule(task_id, body.due_date)
    return DueDateResponse(id=task_id, due_date=due_date)


@router.patch("/{task_id}", response_model=CompletedResponse)
def update_completed(
    task_id: str, body: CompletedUpdate, gateway: TaskGateway = Depends(get_gateway)
):
    """Mark a task as completed or not completed."""
    completed = gateway.set_completed(task_id, body.completed)
    return CompletedResponse(id=task_id, completed=completed)


@router.delete("/{task_id}", response_model=DeletedResponse)
def delete_task(task_id: str, gateway: TaskGateway = Depends(get_gateway)):
    """Delete a task. Unknown ids succeed as well."""
    gateway.delete(task_id)
    return DeletedResponse(id=task_id)
