"""Tests that the snippets behave the way their prose describes."""

from unittest.mock import Mock

import pytest

from solid_principles.snippets.dependency_inversion import bad as dip_bad
from solid_principles.snippets.dependency_inversion import good as dip_good
from solid_principles.snippets.interface_segregation import bad as isp_bad
from solid_principles.snippets.interface_segregation import good as isp_good
from solid_principles.snippets.liskov_substitution import bad as lsp_bad
from solid_principles.snippets.liskov_substitution import good as lsp_good
from solid_principles.snippets.open_closed import bad as ocp_bad
from solid_principles.snippets.open_closed import good as ocp_good
from solid_principles.snippets.single_responsibility import bad as srp_bad
from solid_principles.snippets.single_responsibility import good as srp_good


class TestSingleResponsibility:

    def test_bad_salary_has_every_responsibility(self):
        salary = srp_bad.Salary()

        assert salary.calculate_salary() is None
        assert salary.print_paycheck() is None
        assert salary.save_data() is None

    def test_good_splits_one_method_per_class(self):
        assert srp_good.SalaryCalculate().calculate() is None
        assert srp_good.SalaryPaycheck().print() is None
        assert srp_good.SalaryPersistence().save() is None


class TestOpenClosed:

    def _employee(self, channel):
        employee = ocp_bad.Employee()
        employee.selected_notify_channel = channel
        employee.send_sms_notification = Mock()
        employee.send_email_notification = Mock()
        return employee

    def test_bad_dispatches_on_channel(self):
        sms, email = self._employee("SMS"), self._employee("Email")

        ocp_bad.NotifyManager().notify_all([sms, email])

        sms.send_sms_notification.assert_called_once_with()
        sms.send_email_notification.assert_not_called()
        email.send_email_notification.assert_called_once_with()

    def test_bad_raises_for_unknown_channel(self):
        with pytest.raises(ValueError, match="Unknown Channel"):
            ocp_bad.NotifyManager().notify_all([self._employee("Pigeon")])

    def test_bad_raises_when_no_channel_selected(self):
        with pytest.raises(ValueError):
            ocp_bad.NotifyManager().notify_all([ocp_bad.Employee()])

    def test_good_delegates_to_injected_notifier(self):
        notifiers = [Mock(spec=ocp_good.Notifier) for _ in range(3)]
        employees = [ocp_good.Employee(notifier) for notifier in notifiers]

        ocp_good.NotifyManager().notify_all(employees)

        for notifier in notifiers:
            notifier.notify.assert_called_once_with()

    def test_good_new_channel_needs_no_changes(self):
        calls = []

        class PushNotifier(ocp_good.Notifier):
            def notify(self) -> None:
                calls.append("push")

        ocp_good.NotifyManager().notify_all([ocp_good.Employee(PushNotifier())])

        assert calls == ["push"]

    def test_good_notifier_is_abstract(self):
        with pytest.raises(TypeError):
            ocp_good.Notifier()

        assert isinstance(ocp_good.EmailNotifier(), ocp_good.Notifier)
        assert isinstance(ocp_good.SMSNotifier(), ocp_good.Notifier)


def _stretch(rectangle, width, height):
    rectangle.set_width(width)
    rectangle.set_height(height)
    return rectangle.area()


class TestLiskovSubstitution:

    def test_bad_rectangle_meets_expectation(self):
        assert _stretch(lsp_bad.Rectangle(), 5, 4) == 20

    def test_bad_square_breaks_substitution(self):
        square = lsp_bad.Square()

        assert isinstance(square, lsp_bad.Rectangle)
        assert _stretch(square, 5, 4) == 16
        assert square.width == square.height == 4

    def test_good_shapes_are_siblings(self):
        rectangle = lsp_good.Rectangle(5, 4)
        square = lsp_good.Square(4)

        assert not isinstance(square, lsp_good.Rectangle)
        assert [shape.area() for shape in (rectangle, square)] == [20, 16]

    def test_good_shape_is_abstract(self):
        with pytest.raises(TypeError):
            lsp_good.Shape()


class TestInterfaceSegregation:

    def test_bad_sms_notifier_cannot_attach(self):
        notifier = isp_bad.SMSNotifier()

        assert notifier.notify() is None
        with pytest.raises(NotImplementedError, match="Unsupported operation"):
            notifier.attach_file("report.pdf")

    def test_bad_email_notifier_supports_everything(self):
        notifier = isp_bad.EmailNotifier()

        assert notifier.notify() is None
        assert notifier.attach_file("report.pdf") is None

    def test_good_sms_notifier_only_notifies(self):
        notifier = isp_good.SMSNotifier()

        assert isinstance(notifier, isp_good.Notifier)
        assert not isinstance(notifier, isp_good.Attacher)
        assert not hasattr(notifier, "attach_file")

    def test_good_email_notifier_implements_both(self):
        notifier = isp_good.EmailNotifier()

        assert isinstance(notifier, isp_good.Notifier)
        assert isinstance(notifier, isp_good.Attacher)
        assert notifier.attach_file("report.pdf") is None


class TestDependencyInversion:

    def test_bad_app_builds_its_own_connection(self):
        app = dip_bad.AppInit()

        assert type(app.connection) is dip_bad.DBConnection
        assert app.start() is None

    def test_good_app_accepts_any_connection(self):
        connection = Mock(spec=dip_good.DBConnection)

        dip_good.AppInit(connection).start()

        connection.connect.assert_called_once_with()

    def test_good_mysql_connection_is_a_db_connection(self):
        app = dip_good.AppInit(dip_good.MySQLConnection())

        assert isinstance(app.connection, dip_good.DBConnection)
        assert app.start() is None

    def test_good_connection_is_abstract(self):
        with pytest.raises(TypeError):
            dip_good.DBConnection()
