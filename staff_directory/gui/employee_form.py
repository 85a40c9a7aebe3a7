# gui/employee_form.py
from PySide6.QtCore import QDate
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit, QComboBox,
    QPushButton, QDateEdit, QCheckBox, QMessageBox
)

from staff_directory.exceptions import NotFoundError, PersistenceWriteError, ValidationError
from staff_directory.logic.edit_session import EditSession

FIELD_LABELS = {
    "name": "Full Name",
    "email": "Email Address",
    "role": "Role",
    "department": "Department",
    "salary": "Annual Salary",
    "hire_date": "Hire Date",
    "status": "Status",
}


class EmployeeFormDialog(QDialog):
    """
    Add/edit dialog bound to an EditSession.
    Save commits through the session; a rejected commit keeps the dialog open.
    """
    def __init__(self, session: EditSession, parent=None):
        super().__init__(parent)
        self.session = session
        self.saved = None
        self.setWindowTitle("Edit Employee" if session.is_editing else "Add New Employee")
        self.resize(560, 360)

        self._build_ui()
        self._bind_from_draft()

    # ---------- UI ----------
    def _build_ui(self):
        root = QVBoxLayout(self)
        form = QGridLayout()
        r = 0

        form.addWidget(QLabel("Full Name *"), r, 0)
        self.txt_name = QLineEdit(); self.txt_name.setPlaceholderText("John Doe")
        form.addWidget(self.txt_name, r, 1); r += 1

        form.addWidget(QLabel("Email Address *"), r, 0)
        self.txt_email = QLineEdit(); self.txt_email.setPlaceholderText("john@company.com")
        form.addWidget(self.txt_email, r, 1); r += 1

        form.addWidget(QLabel("Role *"), r, 0)
        self.cmb_role = QComboBox()
        self.cmb_role.addItem("Select Role", userData="")
        for role in self.session.options_for("role"):
            self.cmb_role.addItem(role, userData=role)
        form.addWidget(self.cmb_role, r, 1); r += 1

        form.addWidget(QLabel("Department *"), r, 0)
        self.cmb_dept = QComboBox()
        self.cmb_dept.addItem("Select Department", userData="")
        for dept in self.session.options_for("department"):
            self.cmb_dept.addItem(dept, userData=dept)
        form.addWidget(self.cmb_dept, r, 1); r += 1

        form.addWidget(QLabel("Status"), r, 0)
        self.cmb_status = QComboBox()
        for status in self.session.options_for("status"):
            self.cmb_status.addItem(status, userData=status)
        form.addWidget(self.cmb_status, r, 1); r += 1

        form.addWidget(QLabel("Phone Number"), r, 0)
        self.txt_phone = QLineEdit(); self.txt_phone.setPlaceholderText("+1 (555) 123-4567")
        form.addWidget(self.txt_phone, r, 1); r += 1

        # hire date: unchecked = blank, the store fills in today
        form.addWidget(QLabel("Hire Date"), r, 0)
        date_row = QHBoxLayout()
        self.chk_hire = QCheckBox("Set")
        self.date_hire = QDateEdit(); self.date_hire.setCalendarPopup(True)
        self.date_hire.setDisplayFormat("yyyy-MM-dd")
        self.date_hire.setDate(QDate.currentDate())
        self.chk_hire.toggled.connect(self.date_hire.setEnabled)
        date_row.addWidget(self.chk_hire)
        date_row.addWidget(self.date_hire, 1)
        form.addLayout(date_row, r, 1); r += 1

        form.addWidget(QLabel("Annual Salary"), r, 0)
        self.txt_salary = QLineEdit(); self.txt_salary.setPlaceholderText("50000")
        form.addWidget(self.txt_salary, r, 1); r += 1

        root.addLayout(form)

        action_row = QHBoxLayout()
        self.btn_cancel = QPushButton("Cancel")
        self.btn_save = QPushButton("Update Employee" if self.session.is_editing else "Add Employee")
        self.btn_save.setDefault(True)
        action_row.addStretch(1)
        action_row.addWidget(self.btn_cancel)
        action_row.addWidget(self.btn_save)
        root.addLayout(action_row)

        self.btn_cancel.clicked.connect(self.reject)
        self.btn_save.clicked.connect(self._on_save_clicked)

    # ---------- draft <-> widgets ----------
    def _bind_from_draft(self):
        d = self.session.draft
        self.txt_name.setText(d.get("name", ""))
        self.txt_email.setText(d.get("email", ""))
        _select_data(self.cmb_role, d.get("role", ""))
        _select_data(self.cmb_dept, d.get("department", ""))
        _select_data(self.cmb_status, d.get("status", ""))
        self.txt_phone.setText(d.get("phone", ""))
        self.txt_salary.setText(str(d.get("salary", "")))
        hire = QDate.fromString(d.get("hire_date", ""), "yyyy-MM-dd")
        self.chk_hire.setChecked(hire.isValid())
        self.date_hire.setEnabled(hire.isValid())
        if hire.isValid():
            self.date_hire.setDate(hire)

    def _bind_to_draft(self):
        s = self.session
        s.set_field("name", self.txt_name.text())
        s.set_field("email", self.txt_email.text())
        s.set_field("role", self.cmb_role.currentData() or "")
        s.set_field("department", self.cmb_dept.currentData() or "")
        s.set_field("status", self.cmb_status.currentData() or "")
        s.set_field("phone", self.txt_phone.text())
        s.set_field("salary", self.txt_salary.text())
        hire = self.date_hire.date().toString("yyyy-MM-dd") if self.chk_hire.isChecked() else ""
        s.set_field("hire_date", hire)

    # ---------- buttons ----------
    def _on_save_clicked(self):
        self._bind_to_draft()
        try:
            self.saved = self.session.commit()
        except ValidationError as exc:
            QMessageBox.warning(self, "Check", _validation_message(exc))
            return
        except NotFoundError:
            QMessageBox.warning(self, "Error", "The employee being edited no longer exists.")
            self.reject()
            return
        except PersistenceWriteError as exc:
            QMessageBox.critical(self, "Error", f"Could not save employees.\n{exc}")
            return
        self.accept()

    def reject(self):
        self.session.cancel()
        super().reject()


def _select_data(combo: QComboBox, value: str):
    idx = combo.findData(value)
    combo.setCurrentIndex(idx if idx >= 0 else 0)


def _validation_message(exc: ValidationError) -> str:
    lines = []
    if exc.missing_fields:
        names = ", ".join(FIELD_LABELS.get(f, f) for f in sorted(exc.missing_fields))
        lines.append(f"Please fill in all required fields: {names}")
    if exc.invalid_fields:
        names = ", ".join(FIELD_LABELS.get(f, f) for f in sorted(exc.invalid_fields))
        lines.append(f"Please correct: {names}")
    return "\n".join(lines)
