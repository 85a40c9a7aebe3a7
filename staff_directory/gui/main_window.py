# gui/main_window.py
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QLineEdit,
    QComboBox, QPushButton, QTableWidget, QTableWidgetItem, QMessageBox, QGroupBox,
    QAbstractItemView, QHeaderView, QStackedWidget
)

from staff_directory.config import DEFAULT_CHOICES, Choices
from staff_directory.exceptions import NotFoundError, PersistenceWriteError
from staff_directory.gui.employee_form import EmployeeFormDialog
from staff_directory.logic.edit_session import EditSession
from staff_directory.logic.query import EmployeeFilter
from staff_directory.logic.record_store import RecordStore
from staff_directory.logic.stats import summarize
from staff_directory.utils.date_helper import format_hire_date
from staff_directory.utils.parse_utils import initials

COLUMNS = ["", "Employee", "Email", "Role", "Department", "Status", "Hire Date"]


class MainWindow(QMainWindow):
    """
    Top: search / department / status filters, stat tiles
    Middle: directory table (filtered view of the store)
    Bottom: add / edit / delete
    """
    def __init__(self, store: RecordStore, choices: Choices = DEFAULT_CHOICES):
        super().__init__()
        self.setWindowTitle("StaffGrid - Employee Management")
        self.resize(1100, 720)

        self.store = store
        self.choices = choices
        self.session = EditSession(store, choices)
        self._visible = []   # employees currently shown, row-aligned with the table

        self._build_ui()
        self.refresh()

    # ---------- UI ----------
    def _build_ui(self):
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)

        # filters
        filter_row = QHBoxLayout()
        self.txt_search = QLineEdit()
        self.txt_search.setPlaceholderText("Search employees...")
        self.txt_search.setClearButtonEnabled(True)
        filter_row.addWidget(self.txt_search, 2)

        self.cmb_dept = QComboBox()
        self.cmb_dept.addItem("All Departments", userData="")
        for dept in self.choices.departments:
            self.cmb_dept.addItem(dept, userData=dept)
        filter_row.addWidget(self.cmb_dept, 1)

        self.cmb_status = QComboBox()
        self.cmb_status.addItem("All Statuses", userData="")
        for status in self.choices.statuses:
            self.cmb_status.addItem(status, userData=status)
        filter_row.addWidget(self.cmb_status, 1)

        self.btn_add = QPushButton("+ Add Employee")
        filter_row.addWidget(self.btn_add)
        root.addLayout(filter_row)

        # stat tiles
        stats_box = QGroupBox()
        grid = QGridLayout(stats_box)
        self.lbl_total = _stat_value()
        self.lbl_active = _stat_value()
        self.lbl_leave = _stat_value()
        self.lbl_depts = _stat_value()
        for col, (value, caption) in enumerate([
            (self.lbl_total, "Total Employees"),
            (self.lbl_active, "Active"),
            (self.lbl_leave, "On Leave"),
            (self.lbl_depts, "Departments"),
        ]):
            grid.addWidget(value, 0, col)
            cap = QLabel(caption); cap.setAlignment(Qt.AlignCenter)
            grid.addWidget(cap, 1, col)
        root.addWidget(stats_box)

        # directory
        self.lbl_title = QLabel("")
        self.lbl_title.setStyleSheet("font-weight:600; font-size:15px; padding:4px 0;")
        root.addWidget(self.lbl_title)

        self.table = QTableWidget(0, len(COLUMNS))
        self.table.setHorizontalHeaderLabels(COLUMNS)
        self.table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeToContents)
        self.table.horizontalHeader().setStretchLastSection(True)
        self.table.verticalHeader().setVisible(False)
        self.table.setSelectionBehavior(QAbstractItemView.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)

        self.lbl_empty = QLabel("")
        self.lbl_empty.setAlignment(Qt.AlignCenter)
        self.lbl_empty.setStyleSheet("color:#666; padding:40px;")

        self.stack = QStackedWidget()
        self.stack.addWidget(self.table)
        self.stack.addWidget(self.lbl_empty)
        root.addWidget(self.stack, 1)

        btn_row = QHBoxLayout()
        self.btn_edit = QPushButton("Edit")
        self.btn_del = QPushButton("Delete")
        btn_row.addStretch(1)
        btn_row.addWidget(self.btn_edit)
        btn_row.addWidget(self.btn_del)
        root.addLayout(btn_row)

        self.status = self.statusBar()

        # signals
        self.txt_search.textChanged.connect(self.refresh)
        self.cmb_dept.currentIndexChanged.connect(self.refresh)
        self.cmb_status.currentIndexChanged.connect(self.refresh)
        self.btn_add.clicked.connect(self._on_add_clicked)
        self.btn_edit.clicked.connect(self._on_edit_clicked)
        self.btn_del.clicked.connect(self._on_delete_clicked)
        self.table.cellDoubleClicked.connect(lambda row, _col: self._open_editor(row))

    # ---------- view ----------
    def current_filter(self) -> EmployeeFilter:
        return EmployeeFilter(
            search_term=self.txt_search.text(),
            department=self.cmb_dept.currentData() or "",
            status=self.cmb_status.currentData() or "",
        )

    def refresh(self, *_):
        employees = self.store.list()
        self._visible = self.current_filter().apply(employees)

        stats = summarize(employees)
        self.lbl_total.setText(str(stats.total))
        self.lbl_active.setText(str(stats.active_count))
        self.lbl_leave.setText(str(stats.on_leave_count))
        self.lbl_depts.setText(str(stats.department_count))

        self.lbl_title.setText(f"Employee Directory ({len(self._visible)})")
        self._load_table()

        if self._visible:
            self.stack.setCurrentWidget(self.table)
        elif not employees:
            self.lbl_empty.setText("No employees yet\nAdd your first employee to get started")
            self.stack.setCurrentWidget(self.lbl_empty)
        else:
            self.lbl_empty.setText("No employees found\nTry adjusting your search or filter criteria")
            self.stack.setCurrentWidget(self.lbl_empty)

    def _load_table(self):
        self.table.setRowCount(0)
        for e in self._visible:
            r = self.table.rowCount()
            self.table.insertRow(r)
            avatar = QTableWidgetItem(initials(e.name))
            avatar.setTextAlignment(Qt.AlignCenter)
            self.table.setItem(r, 0, avatar)
            self.table.setItem(r, 1, QTableWidgetItem(e.name))
            self.table.setItem(r, 2, QTableWidgetItem(e.email))
            self.table.setItem(r, 3, QTableWidgetItem(e.role))
            self.table.setItem(r, 4, QTableWidgetItem(e.department))
            self.table.setItem(r, 5, QTableWidgetItem(e.status))
            self.table.setItem(r, 6, QTableWidgetItem(format_hire_date(e.hire_date)))

    def _selected(self):
        row = self.table.currentRow()
        if row < 0 or row >= len(self._visible):
            return None
        return self._visible[row]

    # ---------- actions ----------
    def _on_add_clicked(self):
        self.session.start_new()
        dlg = EmployeeFormDialog(self.session, self)
        if dlg.exec() and dlg.saved is not None:
            self.refresh()
            self._notify("Employee added successfully!")

    def _on_edit_clicked(self):
        row = self.table.currentRow()
        if row < 0:
            QMessageBox.information(self, "Notice", "Select an employee to edit.")
            return
        self._open_editor(row)

    def _open_editor(self, row: int):
        if row < 0 or row >= len(self._visible):
            return
        try:
            self.session.start_edit(self._visible[row].id)
        except NotFoundError:
            QMessageBox.warning(self, "Error", "That employee no longer exists.")
            self.refresh()
            return
        dlg = EmployeeFormDialog(self.session, self)
        if dlg.exec() and dlg.saved is not None:
            self.refresh()
            self._notify("Employee updated successfully!")
        else:
            self.refresh()

    def _on_delete_clicked(self):
        emp = self._selected()
        if emp is None:
            QMessageBox.information(self, "Notice", "Select an employee to delete.")
            return
        answer = QMessageBox.question(
            self, "Delete Employee",
            f"Are you sure you want to delete {emp.name}?\nThis action cannot be undone.",
        )
        if answer != QMessageBox.Yes:
            return
        try:
            self.store.delete(emp.id)
        except NotFoundError:
            QMessageBox.warning(self, "Error", "That employee no longer exists.")
        except PersistenceWriteError as exc:
            QMessageBox.critical(self, "Error", f"Could not save employees.\n{exc}")
        else:
            self._notify("Employee removed successfully!")
        self.refresh()

    def _notify(self, msg: str):
        self.status.showMessage(msg, 3000)
        QMessageBox.information(self, "Done", msg)


def _stat_value() -> QLabel:
    lbl = QLabel("0")
    lbl.setAlignment(Qt.AlignCenter)
    lbl.setStyleSheet("font-size:22px; font-weight:700;")
    return lbl
