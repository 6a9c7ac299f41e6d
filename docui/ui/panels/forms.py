"""
Input form definitions.

Each function returns a fresh InputForm for one command. The field keys are
the parameter names the matching command reads.
"""

from .input_form import FormField, InputForm

CREATE_CONTAINER = "create_container"
PULL_IMAGE = "pull_image"
SAVE_IMAGE = "save_image"
IMPORT_IMAGE = "import_image"
LOAD_IMAGE = "load_image"
EXPORT_CONTAINER = "export_container"
COMMIT_CONTAINER = "commit_container"
CREATE_VOLUME = "create_volume"


def create_container_form(image: str) -> InputForm:
    return InputForm(
        title=f"Create container from {image}",
        fields=[
            FormField("Name"),
            FormField("HostPort"),
            FormField("Port"),
            FormField("HostVolume"),
            FormField("Volume"),
            FormField("Env"),
            FormField("Cmd"),
        ],
        command_id=CREATE_CONTAINER,
        aux_data={"Image": image},
    )


def pull_image_form() -> InputForm:
    return InputForm(
        title="Pull image",
        fields=[FormField("Name", required=True)],
        command_id=PULL_IMAGE,
    )


def save_image_form(name: str) -> InputForm:
    return InputForm(
        title=f"Export image {name}",
        fields=[FormField("Path", required=True)],
        command_id=SAVE_IMAGE,
        aux_data={"ID": name},
    )


def import_image_form() -> InputForm:
    return InputForm(
        title="Import image",
        fields=[
            FormField("Repository", required=True),
            FormField("Tag"),
            FormField("Path", required=True),
        ],
        command_id=IMPORT_IMAGE,
    )


def load_image_form() -> InputForm:
    return InputForm(
        title="Load image",
        fields=[FormField("Path", required=True)],
        command_id=LOAD_IMAGE,
    )


def export_container_form(container: str) -> InputForm:
    return InputForm(
        title=f"Export container {container}",
        fields=[FormField("Path", required=True)],
        command_id=EXPORT_CONTAINER,
        aux_data={"Container": container},
    )


def commit_container_form(container: str) -> InputForm:
    return InputForm(
        title=f"Commit container {container}",
        fields=[FormField("Repository", required=True), FormField("Tag")],
        command_id=COMMIT_CONTAINER,
        aux_data={"Container": container},
    )


def create_volume_form() -> InputForm:
    return InputForm(
        title="Create volume",
        fields=[
            FormField("Name", required=True),
            FormField("Driver", value="local"),
            FormField("Labels"),
            FormField("Options"),
        ],
        command_id=CREATE_VOLUME,
    )
