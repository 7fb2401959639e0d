"""
Project lifecycle service.
Decides whether an actor may move a project through a lifecycle transition.

The decision is a pure function of (actor, project, action). It does not write
anything: callers persist the returned transition with a compare-and-set on the
project's current status.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional

from workportal.domain.models.base import ConflictError, ForbiddenError, InvalidStateError
from workportal.domain.models.profile import Profile, Capability
from workportal.domain.models.project import (
    Project,
    ProjectAction,
    StatusTransition,
    TRANSITIONS,
)


class ProjectRelation(str, Enum):
    """How an actor must relate to the project, on top of holding a capability."""
    OWNER = "owner"
    ASSIGNEE = "assignee"


@dataclass(frozen=True)
class ActorRule:
    capability: Capability
    relation: Optional[ProjectRelation] = None


ACTOR_RULES: Dict[ProjectAction, ActorRule] = {
    ProjectAction.APPLY: ActorRule(Capability.APPLY_TO_PROJECT),
    ProjectAction.SUBMIT_WORK: ActorRule(Capability.SUBMIT_DELIVERABLE, ProjectRelation.ASSIGNEE),
    ProjectAction.REQUEST_REVISION: ActorRule(Capability.REVIEW_DELIVERABLE, ProjectRelation.OWNER),
    ProjectAction.COMPLETE: ActorRule(Capability.REVIEW_DELIVERABLE, ProjectRelation.OWNER),
    ProjectAction.CANCEL: ActorRule(Capability.CANCEL_PROJECT, ProjectRelation.OWNER),
}

_FORBIDDEN_MESSAGES: Dict[ProjectAction, str] = {
    ProjectAction.APPLY: "Only freelancers can apply to projects",
    ProjectAction.SUBMIT_WORK: "Only the assigned freelancer can submit work for this project",
    ProjectAction.REQUEST_REVISION: "Only the project owner can request a revision",
    ProjectAction.COMPLETE: "Only the project owner can approve work",
    ProjectAction.CANCEL: "Only the project owner can cancel this project",
}


class ProjectLifecycleService:
    """Authorization and state checks for project lifecycle transitions."""

    def is_actor_allowed(self, actor: Profile, project: Project, action: ProjectAction) -> bool:
        rule = ACTOR_RULES[action]
        if not actor.can(rule.capability):
            return False
        if rule.relation == ProjectRelation.OWNER:
            return project.is_owned_by(actor.id)
        if rule.relation == ProjectRelation.ASSIGNEE:
            return project.is_assigned_to(actor.id)
        return True

    def authorize(self, actor: Profile, project: Project, action: ProjectAction) -> StatusTransition:
        """
        Return the transition the actor may perform.

        Raises InvalidStateError when the project is terminal, ForbiddenError when
        the actor is not allowed to perform the action, and InvalidStateError when
        the current status is not a valid source for it. Checked in that order.

        Applying to a project another freelancer already holds raises ConflictError:
        the caller lost the race, whether it saw the claim or not.
        """
        if project.status.is_terminal:
            raise InvalidStateError(
                f"Project is {project.status.value}; no further changes are allowed"
            )
        if not self.is_actor_allowed(actor, project, action):
            raise ForbiddenError(_FORBIDDEN_MESSAGES[action])
        if action == ProjectAction.APPLY and project.freelancer_id is not None:
            raise ConflictError("This project has already been claimed")
        return project.transition_for(action)

    def ensure_can_post(self, actor: Profile) -> None:
        if not actor.can(Capability.POST_PROJECT):
            raise ForbiddenError("Only clients can post projects")

    def available_actions(self, actor: Profile, project: Project) -> List[ProjectAction]:
        """Actions the actor could take on the project right now."""
        if project.status.is_terminal:
            return []
        return [
            action
            for action, transition in TRANSITIONS.items()
            if transition.allows(project.status) and self.is_actor_allowed(actor, project, action)
        ]
